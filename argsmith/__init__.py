"""
Argsmith CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ArgsmithError, CommandArgumentError, SpecError
from .mode import ParseMode
from .parser import (
    ArgType,
    Arity,
    CommandParser,
    CommandSpec,
    OptionAction,
    ParseResult,
    parse,
)

logger = logging.getLogger("argsmith")


__all__ = [
    "ArgType",
    "ArgsmithError",
    "Arity",
    "CommandArgumentError",
    "CommandParser",
    "CommandSpec",
    "OptionAction",
    "ParseMode",
    "ParseResult",
    "SpecError",
    "parse",
]
