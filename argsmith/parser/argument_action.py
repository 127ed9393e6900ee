# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionAction`, an enum describing how repeated occurrences of an
option combine into its parsed value.

Supports alias coercion for shorthand or config-friendly values.

Example:
    OptionAction("store")  → OptionAction.STORE
    OptionAction("+=")     → OptionAction.APPEND (via alias)
    OptionAction("counter") → OptionAction.COUNT (via alias)
"""
from __future__ import annotations

from enum import Enum


class OptionAction(Enum):
    """
    Defines the action taken each time an option is encountered.

    Members:
        STORE: Store the value, overwriting an earlier occurrence (default).
        COUNT: Count the occurrences; the value, if any, is ignored.
        APPEND: Append the value to a list.

    Aliases:
        - "set" → "store"
        - "counter" → "count"
        - "+=" / "list" → "append"
    """

    STORE = "store"
    COUNT = "count"
    APPEND = "append"

    @classmethod
    def choices(cls) -> list[OptionAction]:
        """Return a list of all option actions."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "set": "store",
            "counter": "count",
            "+=": "append",
            "list": "append",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the option action."""
        return self.value
