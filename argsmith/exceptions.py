# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argsmith.

Parsing user input never raises: problems found in an argument vector are
collected as `ParseError` values and returned with the parse result. The
exceptions below cover the remaining cases.

Exception Hierarchy:
- ArgsmithError
    ├── SpecError
    ├── CastError
    └── CommandArgumentError
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from argsmith.parser.errors import ParseError


class ArgsmithError(Exception):
    """Base exception for Argsmith."""


class SpecError(ArgsmithError):
    """Exception raised when a command spec or spec file is malformed."""


class CastError(ArgsmithError, ValueError):
    """Exception raised when a raw token cannot be cast to its declared type.

    `message` holds the text reported by a custom type function, or None for
    the built-in types.
    """

    def __init__(self, message: str | None = None):
        super().__init__(message or "")
        self.message = message


class CommandArgumentError(ArgsmithError):
    """Exception raised on request when a parse result contains errors."""

    def __init__(self, errors: Sequence[ParseError], message: str | None = None):
        from argsmith.feedback import format_errors

        self.errors = list(errors)
        super().__init__(message or format_errors(self.errors))
