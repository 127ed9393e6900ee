"""
Argsmith CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument, Option
from .argument_action import OptionAction
from .command_parser import CommandParser, ParseResult, parse
from .compiled_config import CompiledConfig, compile_config
from .errors import (
    InvalidArgument,
    InvalidOptionValue,
    MissingArgument,
    MissingOptionValue,
    ParseError,
    UnknownArgument,
    UnknownOption,
)
from .parser_types import ArgType, Arity, CustomType, resolve_type
from .spec import CommandSpec

__all__ = [
    "ArgType",
    "Argument",
    "Arity",
    "CommandParser",
    "CommandSpec",
    "CompiledConfig",
    "CustomType",
    "InvalidArgument",
    "InvalidOptionValue",
    "MissingArgument",
    "MissingOptionValue",
    "Option",
    "OptionAction",
    "ParseError",
    "ParseResult",
    "UnknownArgument",
    "UnknownOption",
    "compile_config",
    "parse",
    "resolve_type",
]
