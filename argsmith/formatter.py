# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Plain-text layout helpers for help output.

- `format_text(text, width)`: word-wraps every line of `text` to `width`.
- `format_columns(columns)`: lays out `(text, width)` pairs side by side, each
  column wrapped to its own width.

Both remove trailing whitespace from every line and from the result. Words
longer than the available width are split.
"""
from __future__ import annotations

import textwrap
from typing import Sequence


def wrap_lines(text: str, width: int) -> list[str]:
    """Wrap each line of `text`, keeping blank lines and leading indentation."""
    width = max(width, 1)
    lines: list[str] = []
    for line in text.split("\n"):
        wrapped = textwrap.wrap(
            line,
            width,
            break_on_hyphens=False,
            replace_whitespace=False,
            expand_tabs=False,
        )
        lines.extend(wrapped or [""])
    return lines


def format_text(text: str, width: int) -> str:
    return "\n".join(line.rstrip() for line in wrap_lines(text, width)).rstrip()


def format_columns(columns: Sequence[tuple[str, int]]) -> str:
    """
    Lay out columns side by side.

    Example:
        format_columns([("", 2), ("-v", 2), ("", 2), ("verbose output", 8)])
        → "  -v  verbose\\n      output"
    """
    wrapped = [(wrap_lines(text, width), max(width, 1)) for text, width in columns]
    height = max((len(lines) for lines, _ in wrapped), default=0)

    rows = []
    for index in range(height):
        row = "".join(
            (lines[index] if index < len(lines) else "").ljust(width)
            for lines, width in wrapped
        )
        rows.append(row.rstrip())
    return "\n".join(rows).rstrip()
