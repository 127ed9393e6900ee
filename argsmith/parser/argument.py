# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` and `Option` dataclasses used by Argsmith to describe
the positional and optional arguments of one command.

Instances are normally created through `CommandSpec.add_argument()` and
`CommandSpec.add_option()`, which validate them and fill in defaults and value
names. The parser assumes these invariants hold and never re-checks them.

Key Attributes:
- `key`: Name of the entry in the parsed result.
- `type`: `ArgType` or `CustomType` used to cast each raw token.
- `nargs` (arguments): `Arity` of the positional slot.
- `short` / `long` (options): One-character and longer names, without dashes.
- `action` (options): `OptionAction` deciding how repeated occurrences combine.
- `default`: Value used when nothing was given on the command line.
- `value_name`: Placeholder shown in help and error messages (e.g. `FILE`).

Used By:
- `CommandSpec` (construction and validation)
- `compile_config()` (lookup tables)
- `argsmith.feedback` (usage lines, help rows and error messages)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from argsmith.parser.argument_action import OptionAction
from argsmith.parser.parser_types import ArgType, Arity, ValueType, is_boolean


@dataclass
class Argument:
    """
    Represents a positional argument.

    Attributes:
        key (str): The destination name in the parsed result.
        type (ValueType): The type each token is cast to.
        nargs (Arity): How many tokens the slot consumes.
        default (Any): Value used when the slot receives no tokens.
        value_name (str): Placeholder shown in help, e.g. `SRC`.
        help (str): Help text for the argument.
    """

    key: str
    type: ValueType = ArgType.STRING
    nargs: Arity = Arity.ONE
    default: Any = None
    value_name: str = ""
    help: str = ""

    @property
    def required(self) -> bool:
        return self.nargs.required

    def get_placeholder(self) -> str:
        """Get the usage placeholder, e.g. `<SRC>...` or `[METHOD]`."""
        if self.nargs is Arity.OPTIONAL:
            return f"[{self.value_name}]"
        elif self.nargs is Arity.ZERO_OR_MORE:
            return f"[{self.value_name}]..."
        elif self.nargs is Arity.ONE_OR_MORE:
            return f"<{self.value_name}>..."
        return f"<{self.value_name}>"


@dataclass
class Option:
    """
    Represents an optional argument (a flag or an option taking a value).

    Attributes:
        key (str): The destination name in the parsed result.
        short (str | None): Single-character name, used as `-s`.
        long (str | None): Multi-character name, used as `--long`.
        type (ValueType): The type the value is cast to.
        action (OptionAction): How repeated occurrences combine.
        default (Any): Value used when the option does not appear.
        value_name (str): Placeholder shown in help, e.g. `MODE`.
        help (str): Help text for the option.
    """

    key: str
    short: str | None = None
    long: str | None = None
    type: ValueType = ArgType.STRING
    action: OptionAction = OptionAction.STORE
    default: Any = None
    value_name: str = ""
    help: str = ""

    @property
    def takes_value(self) -> bool:
        """Boolean options never consume a following token."""
        return not is_boolean(self.type)

    @property
    def flags(self) -> tuple[str, ...]:
        flags = []
        if self.short:
            flags.append(f"-{self.short}")
        if self.long:
            flags.append(f"--{self.long}")
        return tuple(flags)

    def get_flag_text(self) -> str:
        """Get the help label, e.g. `-m, --mode <MODE>` or `-v, --verbose...`."""
        if self.short and self.long:
            text = f"-{self.short}, --{self.long}"
        elif self.short:
            text = f"-{self.short}"
        else:
            text = f"    --{self.long}"

        if is_boolean(self.type) and self.action is OptionAction.COUNT:
            text += "..."
        if self.takes_value:
            text += f" <{self.value_name}>"
        return text
