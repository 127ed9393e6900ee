# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolves option names found on the command line to declared options.

Negation is a lexical convention over boolean long options: `--no-debug`
resolves to the `debug` option with `negated=True`. An option literally
named `no-something` still resolves when no boolean `something` exists.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from argsmith.parser.argument import Option
from argsmith.parser.compiled_config import CompiledConfig
from argsmith.parser.parser_types import is_boolean

NEGATION_PREFIX = "no-"


class OptionKind(Enum):
    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True)
class TaggedOption:
    """A declared option matched by a name on the command line."""

    name: str
    option: Option
    negated: bool = False

    @property
    def takes_value(self) -> bool:
        return self.option.takes_value


def tag_option(
    config: CompiledConfig, kind: OptionKind, name: str
) -> TaggedOption | None:
    """
    Look up `name` in the short or long option table.

    Returns:
        TaggedOption | None: The matched option, or None when unknown.
    """
    if kind is OptionKind.SHORT:
        option = config.short_options.get(name)
        return TaggedOption(name, option) if option else None

    if name.startswith(NEGATION_PREFIX):
        base_name = name[len(NEGATION_PREFIX) :]
        option = config.long_options.get(base_name)
        if option and is_boolean(option.type):
            return TaggedOption(base_name, option, negated=True)

    option = config.long_options.get(name)
    return TaggedOption(name, option) if option else None
