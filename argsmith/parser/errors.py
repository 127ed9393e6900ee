# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parse errors collected by Argsmith's parser.

The parser never raises for bad user input. Each problem is recorded as one
of the frozen dataclasses below and returned with the parse result, so a
single call reports every problem at once.

Errors compare by their identifying fields only (the raw token, the key and
the rejected value). The remaining detail fields feed message formatting in
`argsmith.feedback` and are excluded from equality:

    UnknownOption("-X") == UnknownOption("-X")
    InvalidArgument("port", "abc") == InvalidArgument("port", "abc", message="...")
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from argsmith.parser.argument_action import OptionAction
from argsmith.parser.parser_types import Arity, ValueType


@dataclass(frozen=True)
class UnknownOption:
    """A token looked like an option but matched no declared option."""

    token: str


@dataclass(frozen=True)
class MissingOptionValue:
    """An option requires a value but the argument vector ran out."""

    token: str
    key: str | None = field(default=None, compare=False)
    type: ValueType | None = field(default=None, compare=False)
    action: OptionAction | None = field(default=None, compare=False)
    value_name: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class InvalidOptionValue:
    """An option value failed type casting."""

    token: str
    value: str
    key: str | None = field(default=None, compare=False)
    type: ValueType | None = field(default=None, compare=False)
    action: OptionAction | None = field(default=None, compare=False)
    value_name: str | None = field(default=None, compare=False)
    message: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class UnknownArgument:
    """A positional token was left over after slot allocation."""

    token: str


@dataclass(frozen=True)
class MissingArgument:
    """A required positional slot received no tokens."""

    key: str
    type: ValueType | None = field(default=None, compare=False)
    nargs: Arity | None = field(default=None, compare=False)
    value_name: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class InvalidArgument:
    """A positional token failed type casting for its slot."""

    key: str
    value: str
    type: ValueType | None = field(default=None, compare=False)
    nargs: Arity | None = field(default=None, compare=False)
    value_name: str | None = field(default=None, compare=False)
    message: str | None = field(default=None, compare=False)


ParseError = Union[
    UnknownOption,
    MissingOptionValue,
    InvalidOptionValue,
    UnknownArgument,
    MissingArgument,
    InvalidArgument,
]

OPTION_ERRORS = (UnknownOption, MissingOptionValue, InvalidOptionValue)
ARGUMENT_ERRORS = (UnknownArgument, MissingArgument, InvalidArgument)
