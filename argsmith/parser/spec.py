# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandSpec`, the declarative description of a command
that Argsmith parses argument vectors against and generates help from.

A spec lists the command's positional arguments, its options and its
subcommands. Entries are registered through `add_argument()`, `add_option()`
and `add_command()`, which normalise declarations (type aliases, arities,
actions, defaults and value names) and validate them. Malformed declarations
raise `SpecError` at construction time; the parser never re-checks them.

Key Features:
- Type declarations by name (`"int"`), by builtin (`int`) or by callable
- Defaults derived from arity and action when none is given
- Value names derived from the key (`src` → `SRC`)
- Nested subcommands, built programmatically or from a mapping (`from_dict()`)
- Flattening of a subcommand chain into one parseable command (`resolve()`)

Example Usage:
    spec = CommandSpec("cp", summary="Copy files.")
    spec.add_argument("src", nargs="+")
    spec.add_argument("dst")
    spec.add_option("recursive", short="r", long="recursive", type="bool")

    result = parse(spec, ["-r", "a", "b", "dest/"])
    # result.args == {"src": ["a", "b"], "dst": "dest/"}
    # result.opts == {"recursive": True}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from argsmith.exceptions import SpecError
from argsmith.logger import logger
from argsmith.parser.argument import Argument, Option
from argsmith.parser.argument_action import OptionAction
from argsmith.parser.parser_types import (
    ArgType,
    Arity,
    ValueType,
    is_boolean,
    resolve_type,
)

_COMMAND_KEYS = frozenset(
    {"args", "opts", "cmds", "summary", "description", "epilogue", "help"}
)


@dataclass
class CommandSpec:
    """
    Declarative description of one command and its subcommands.

    Attributes:
        name (str): Command name, the program name for the root command.
        arguments (list[Argument]): Positional arguments in order.
        options (list[Option]): Options in declaration order.
        commands (list[CommandSpec]): Subcommands in declaration order.
        summary (str): One-line summary shown at the top of help.
        description (str): Longer description shown below the summary.
        epilogue (str): Text shown at the end of help.
        help (str): Short help shown in the parent's command list.
        path (tuple[str, ...]): Full command path, root first.
    """

    name: str
    arguments: list[Argument] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)
    commands: list[CommandSpec] = field(default_factory=list)
    summary: str = ""
    description: str = ""
    epilogue: str = ""
    help: str = ""
    path: tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise SpecError(
                f"command name must be a non-empty string, got {self.name!r}"
            )
        if not self.path:
            self.path = (self.name,)

    def _location(self, kind: str, key: str) -> str:
        return f"{kind} {key!r} under the command path {list(self.path)} - "

    def _validate_key(self, kind: str, key: str, existing: Sequence[str]) -> None:
        if not isinstance(key, str) or not key.isidentifier():
            raise SpecError(
                self._location(kind, str(key))
                + "expected key to be a valid identifier"
            )
        if key in existing:
            raise SpecError(self._location(kind, key) + "expected key to be unique")

    def _validate_type(self, kind: str, key: str, value_type: Any) -> ValueType:
        try:
            return resolve_type(value_type)
        except (ValueError, TypeError) as error:
            raise SpecError(self._location(kind, key) + str(error)) from error

    def _validate_nargs(self, key: str, nargs: Any) -> Arity:
        try:
            return Arity(nargs)
        except ValueError as error:
            raise SpecError(self._location("arg", key) + str(error)) from error

    def _validate_action(self, key: str, action: Any) -> OptionAction:
        if isinstance(action, OptionAction):
            return action
        try:
            return OptionAction(action)
        except ValueError as error:
            raise SpecError(self._location("opt", key) + str(error)) from error

    def _validate_names(self, key: str, short: str | None, long: str | None) -> None:
        """Check option names and that they are free in this command."""
        location = self._location("opt", key)
        if short is None and long is None:
            raise SpecError(location + "expected short or long to be set")
        if short is not None:
            if not isinstance(short, str) or len(short) != 1:
                raise SpecError(
                    location + f"expected short to be a one-char string, got: {short!r}"
                )
            if short == "-" or short.isspace():
                raise SpecError(location + f"invalid short name {short!r}")
        if long is not None:
            if not isinstance(long, str) or len(long) < 2:
                raise SpecError(
                    location
                    + f"expected long to be a multi-chars string, got: {long!r}"
                )
            if long.startswith("-") or "=" in long or any(c.isspace() for c in long):
                raise SpecError(location + f"invalid long name {long!r}")

        for option in self.options:
            if short is not None and option.short == short:
                raise SpecError(
                    location + f"short '-{short}' is already used by opt {option.key!r}"
                )
            if long is not None and option.long == long:
                raise SpecError(
                    location + f"long '--{long}' is already used by opt {option.key!r}"
                )

    def _resolve_argument_default(self, default: Any, nargs: Arity) -> Any:
        if default is None and nargs.unbounded:
            return []
        return default

    def _resolve_option_default(
        self, default: Any, value_type: ValueType, action: OptionAction
    ) -> Any:
        if default is not None:
            return default
        if action is OptionAction.COUNT:
            return 0
        elif action is OptionAction.APPEND:
            return []
        elif is_boolean(value_type):
            return False
        return None

    def add_argument(
        self,
        key: str,
        type: Any = ArgType.STRING,
        nargs: Arity | str | int | None = None,
        default: Any = None,
        value_name: str | None = None,
        help: str = "",
    ) -> Argument:
        """
        Register a positional argument.

        Args:
            key (str): Destination name in the parsed result.
            type (Any): Type name, `ArgType`, builtin or conversion callable.
            nargs (Arity | str | int | None): `None`/`1`, `"?"`, `"*"` or `"+"`.
            default (Any): Value used when the slot receives no tokens. Defaults
                to `None` for single slots and `[]` for unbounded slots.
            value_name (str | None): Placeholder in help, defaults to `KEY`.
            help (str): Help text for the argument.

        Returns:
            Argument: The registered argument.
        """
        self._validate_key("arg", key, [argument.key for argument in self.arguments])
        value_type = self._validate_type("arg", key, type)
        arity = self._validate_nargs(key, nargs)
        argument = Argument(
            key=key,
            type=value_type,
            nargs=arity,
            default=self._resolve_argument_default(default, arity),
            value_name=value_name or key.upper(),
            help=help or "",
        )
        self.arguments.append(argument)

        unbounded = [arg.key for arg in self.arguments if arg.nargs.unbounded]
        if len(unbounded) > 1:
            logger.warning(
                "Command '%s' declares several unbounded arguments %s; "
                "tokens are assigned to the leftmost one first.",
                " ".join(self.path),
                unbounded,
            )
        return argument

    def add_option(
        self,
        key: str,
        short: str | None = None,
        long: str | None = None,
        type: Any = ArgType.STRING,
        action: OptionAction | str = OptionAction.STORE,
        default: Any = None,
        value_name: str | None = None,
        help: str = "",
    ) -> Option:
        """
        Register an option.

        Args:
            key (str): Destination name in the parsed result.
            short (str | None): One-character name, used as `-s`.
            long (str | None): Longer name, used as `--long`.
            type (Any): Type name, `ArgType`, builtin or conversion callable.
                Boolean options are flags and never take a separate value.
            action (OptionAction | str): `"store"`, `"count"` or `"append"`.
            default (Any): Value used when the option is absent. Defaults to
                `False` for boolean flags, `0` for counters, `[]` for appended
                lists and `None` otherwise.
            value_name (str | None): Placeholder in help, defaults to `KEY`.
            help (str): Help text for the option.

        Returns:
            Option: The registered option.
        """
        self._validate_key("opt", key, [option.key for option in self.options])
        self._validate_names(key, short, long)
        value_type = self._validate_type("opt", key, type)
        option_action = self._validate_action(key, action)
        option = Option(
            key=key,
            short=short,
            long=long,
            type=value_type,
            action=option_action,
            default=self._resolve_option_default(default, value_type, option_action),
            value_name=value_name or key.upper(),
            help=help or "",
        )
        self.options.append(option)
        return option

    def add_command(self, command: CommandSpec) -> CommandSpec:
        """Register a subcommand. Its path (and its children's) is re-rooted here."""
        if not isinstance(command, CommandSpec):
            raise SpecError(f"expected a CommandSpec, got {type(command).__name__}")
        if self.get_command(command.name) is not None:
            raise SpecError(
                f"cmd {command.name!r} under the command path {list(self.path)} - "
                "expected name to be unique"
            )
        command._set_path(self.path + (command.name,))
        self.commands.append(command)
        return command

    def _set_path(self, path: tuple[str, ...]) -> None:
        self.path = path
        for command in self.commands:
            command._set_path(path + (command.name,))

    def get_command(self, name: str) -> CommandSpec | None:
        return next((cmd for cmd in self.commands if cmd.name == name), None)

    def resolve(self, subcmd_path: Sequence[str] = ()) -> CommandSpec:
        """
        Flatten the chain from this command down `subcmd_path`.

        Positional arguments are concatenated root first. Options are merged:
        a subcommand option replaces an inherited option with the same key or
        with a clashing short or long name. Texts and subcommands come from the
        last command of the chain.

        Raises:
            SpecError: If a name in `subcmd_path` is not a subcommand.
        """
        command = self
        arguments = list(self.arguments)
        options = list(self.options)
        for name in subcmd_path:
            child = command.get_command(name)
            if child is None:
                raise SpecError(
                    f"unknown command {name!r} under the command path "
                    f"{list(command.path)}"
                )
            command = child
            arguments.extend(child.arguments)
            for option in child.options:
                options = _merge_option(options, option)

        keys = [argument.key for argument in arguments]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise SpecError(
                f"command path {list(command.path)} - expected argument keys to be "
                f"unique, got duplicates: {duplicates}"
            )

        return CommandSpec(
            name=command.name,
            arguments=arguments,
            options=options,
            commands=list(command.commands),
            summary=command.summary,
            description=command.description,
            epilogue=command.epilogue,
            help=command.help,
            path=command.path,
        )

    @classmethod
    def from_dict(
        cls,
        name: str,
        raw: Mapping[str, Any],
        path: tuple[str, ...] = (),
    ) -> CommandSpec:
        """
        Build a command tree from a nested mapping.

        Example:
            CommandSpec.from_dict("calc", {
                "summary": "A simple calculator.",
                "opts": {"debug": {"short": "d", "long": "debug", "type": "bool"}},
                "cmds": {
                    "add": {
                        "help": "add two numbers",
                        "args": {"left": {"type": "int"}, "right": {"type": "int"}},
                    },
                },
            })

        `args`, `opts` and `cmds` may be mappings keyed by name (in order) or
        lists of mappings each carrying a `key` (or `name` for commands).
        """
        if not isinstance(raw, Mapping):
            raise SpecError(
                f"cmd {name!r} - expected a mapping, got {type(raw).__name__}"
            )
        unknown = sorted(set(raw) - _COMMAND_KEYS)
        if unknown:
            raise SpecError(f"cmd {name!r} - unknown fields: {unknown}")

        spec = cls(
            name=name,
            summary=raw.get("summary") or "",
            description=raw.get("description") or "",
            epilogue=raw.get("epilogue") or "",
            help=raw.get("help") or "",
            path=path + (name,),
        )
        for key, entry in _entries(raw.get("args"), "key"):
            try:
                spec.add_argument(key, **entry)
            except TypeError as error:
                raise SpecError(spec._location("arg", key) + str(error)) from error
        for key, entry in _entries(raw.get("opts"), "key"):
            try:
                spec.add_option(key, **entry)
            except TypeError as error:
                raise SpecError(spec._location("opt", key) + str(error)) from error
        for cmd_name, entry in _entries(raw.get("cmds"), "name"):
            spec.add_command(cls.from_dict(cmd_name, entry, spec.path))
        return spec


def _merge_option(options: list[Option], new: Option) -> list[Option]:
    """Replace the option with `new`'s key in place, dropping any flag clashes."""
    merged = []
    replaced = False
    for option in options:
        if option.key == new.key:
            merged.append(new)
            replaced = True
        elif set(option.flags) & set(new.flags):
            logger.debug(
                "Option '%s' is shadowed by '%s' sharing %s.",
                option.key,
                new.key,
                sorted(set(option.flags) & set(new.flags)),
            )
        else:
            merged.append(option)
    if not replaced:
        merged.append(new)
    return merged


def _entries(raw: Any, name_field: str) -> list[tuple[str, dict[str, Any]]]:
    if raw is None:
        return []
    if isinstance(raw, Mapping):
        return [(key, dict(entry or {})) for key, entry in raw.items()]
    entries = []
    for entry in raw:
        entry = dict(entry)
        if name_field not in entry:
            raise SpecError(f"expected every entry to define {name_field!r}: {entry}")
        entries.append((entry.pop(name_field), entry))
    return entries
