# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value types and arities for Argsmith's argument parser.

Contents:
- `ArgType`: The closed set of primitive value types (string, boolean, integer, float).
- `CustomType`: Wraps a user function converting a raw token into a value.
- `ValueType`: `ArgType | CustomType`, the type of every argument and option.
- `Arity`: How many tokens a positional slot consumes (`1`, `?`, `*`, `+`).
- `resolve_type()`: Coerces aliases, builtins and callables into a `ValueType`.

Example:
    resolve_type("int")      → ArgType.INTEGER
    resolve_type(bool)       → ArgType.BOOLEAN
    resolve_type(parse_port) → CustomType(func=parse_port, name="parse_port")
    Arity("+")               → Arity.ONE_OR_MORE
    Arity(None)              → Arity.ONE
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union


class ArgType(Enum):
    """
    Primitive value types.

    Aliases:
        - "str" → "string"
        - "bool" → "boolean"
        - "int" → "integer"
        - "double" → "float"
    """

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"

    @classmethod
    def choices(cls) -> list[ArgType]:
        """Return a list of all argument types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "bool": "boolean",
            "int": "integer",
            "double": "float",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgType:
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
        return self.value


@dataclass(frozen=True)
class CustomType:
    """
    A user-supplied conversion.

    The function receives the raw token and returns the converted value. It
    reports a bad token by raising `ValueError` (or `TypeError`); the text of
    that exception is kept as the error message.
    """

    func: Callable[[str], Any]
    name: str = ""

    def __post_init__(self):
        if not callable(self.func):
            raise TypeError(f"{self.func!r} is not callable")
        if not self.name:
            object.__setattr__(
                self, "name", getattr(self.func, "__name__", type(self.func).__name__)
            )

    def __call__(self, value: str) -> Any:
        return self.func(value)

    def __str__(self) -> str:
        return self.name


ValueType = Union[ArgType, CustomType]

_BUILTIN_TYPES: dict[type, ArgType] = {
    str: ArgType.STRING,
    bool: ArgType.BOOLEAN,
    int: ArgType.INTEGER,
    float: ArgType.FLOAT,
}


def resolve_type(value_type: Any) -> ValueType:
    """
    Coerce a type declaration into a `ValueType`.

    Accepts an `ArgType`, a `CustomType`, a type name or alias, one of the
    builtins `str`/`bool`/`int`/`float`, or any other callable (wrapped in a
    `CustomType`).

    Raises:
        ValueError: If the declaration is not recognised.
    """
    if isinstance(value_type, (ArgType, CustomType)):
        return value_type
    if value_type is None:
        return ArgType.STRING
    if isinstance(value_type, str):
        return ArgType(value_type)
    if isinstance(value_type, type) and value_type in _BUILTIN_TYPES:
        return _BUILTIN_TYPES[value_type]
    if callable(value_type):
        return CustomType(value_type)
    raise ValueError(f"Invalid type: {value_type!r}")


def is_boolean(value_type: ValueType) -> bool:
    return value_type is ArgType.BOOLEAN


class Arity(Enum):
    """
    The number of tokens a positional argument consumes.

    Members:
        ONE: exactly one token (`None` or `1` when declared).
        OPTIONAL: zero or one token (`?`).
        ZERO_OR_MORE: any number of tokens (`*`).
        ONE_OR_MORE: at least one token (`+`).
    """

    ONE = "1"
    OPTIONAL = "?"
    ZERO_OR_MORE = "*"
    ONE_OR_MORE = "+"

    @classmethod
    def _missing_(cls, value: object) -> Arity:
        if value is None or value == 1:
            return cls.ONE
        if isinstance(value, str):
            normalized = value.strip()
            for member in cls:
                if member.value == normalized:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: {value!r}. Must be one of: {valid}")

    @property
    def required(self) -> bool:
        return self in (Arity.ONE, Arity.ONE_OR_MORE)

    @property
    def unbounded(self) -> bool:
        return self in (Arity.ZERO_OR_MORE, Arity.ONE_OR_MORE)

    @property
    def min_count(self) -> int:
        return 1 if self.required else 0

    @property
    def max_count(self) -> int | None:
        """Largest number of tokens accepted, None when unbounded."""
        return None if self.unbounded else 1

    def __str__(self) -> str:
        return self.value
