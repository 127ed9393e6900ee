# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for Argsmith argument parsing.

Every raw token goes through `coerce_value` on its way into a parse result.
Failures raise `CastError`; the parser turns them into `InvalidOptionValue` or
`InvalidArgument` errors instead of letting them escape.

Functions:
- coerce_bool: Convert a flag value (or its absence) to a boolean.
- coerce_integer: Convert a base-10 integer string.
- coerce_float: Convert a base-10 float string.
- coerce_value: Convert a raw token to the declared `ValueType`.
"""
from __future__ import annotations

import re
from typing import Any

from argsmith.exceptions import CastError
from argsmith.parser.parser_types import ArgType, CustomType, ValueType

TRUE_VALUES = frozenset({"true", "t", "yes", "y", "on", "enabled", "1"})
FALSE_VALUES = frozenset({"false", "f", "no", "n", "off", "disabled", "0"})

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def coerce_bool(value: str | None, negated: bool = False) -> bool:
    """
    Convert a flag value to a boolean.

    A bare flag (`value is None`) is True, or False when reached through its
    `--no-` form. Negated flags accept no explicit value at all.

    Args:
        value (str | None): The inline value, if one was given.
        negated (bool): Whether the flag was written as `--no-<name>`.

    Returns:
        bool: Parsed boolean result.

    Raises:
        CastError: If the value is not a recognised truthy or falsy word.
    """
    if negated:
        if value is None:
            return False
        raise CastError()
    if value is None:
        return True
    normalized = value.lower()
    if normalized in TRUE_VALUES:
        return True
    elif normalized in FALSE_VALUES:
        return False
    raise CastError()


def coerce_integer(value: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(value):
        raise CastError()
    return int(value)


def coerce_float(value: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(value):
        raise CastError()
    return float(value)


def coerce_value(
    value: str | None, value_type: ValueType, negated: bool = False
) -> Any:
    """
    Convert a raw token to the given value type.

    Args:
        value (str | None): The raw token, None when a flag was given bare.
        value_type (ValueType): The declared type.
        negated (bool): Whether a boolean flag was given in its `--no-` form.

    Returns:
        Any: The converted value.

    Raises:
        CastError: If conversion fails. For custom types the error carries the
            message of the exception raised by the user function.
    """
    if value_type is ArgType.BOOLEAN:
        return coerce_bool(value, negated)

    if value is None:
        raise CastError()

    if value_type is ArgType.STRING:
        return value
    if value_type is ArgType.INTEGER:
        return coerce_integer(value)
    if value_type is ArgType.FLOAT:
        return coerce_float(value)
    if isinstance(value_type, CustomType):
        try:
            return value_type(value)
        except CastError:
            raise
        except (ValueError, TypeError) as error:
            raise CastError(str(error) or None) from error

    raise TypeError(f"Unsupported value type: {value_type!r}")
