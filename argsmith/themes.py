# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palette and rich theme used when Argsmith prints help and errors.
"""
from rich.theme import Theme


class NordColors:
    """A subset of the Nord palette."""

    POLAR_NIGHT_ORIGIN = "#2E3440"
    SNOW_STORM_BRIGHTEST = "#ECEFF4"
    FROST_TEAL = "#8FBCBB"
    FROST_ICE = "#88C0D0"
    FROST_SKY = "#81A1C1"
    AURORA_RED = "#BF616A"
    AURORA_YELLOW = "#EBCB8B"
    AURORA_GREEN = "#A3BE8C"
    COMMENT_GREY = "#616E88"


def get_nord_theme() -> Theme:
    return Theme(
        {
            "argsmith.header": f"bold {NordColors.FROST_ICE}",
            "argsmith.flag": NordColors.FROST_TEAL,
            "argsmith.placeholder": NordColors.AURORA_YELLOW,
            "argsmith.epilogue": NordColors.COMMENT_GREY,
            "argsmith.error": f"bold {NordColors.AURORA_RED}",
            "argsmith.success": NordColors.AURORA_GREEN,
        }
    )
