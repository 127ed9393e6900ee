# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Spec file loader for Argsmith command specs.

A spec file describes a command tree in YAML or TOML:

    name: calc
    summary: A simple calculator.
    opts:
      - key: debug
        short: d
        long: debug
        type: bool
        help: enable debug logging
    cmds:
      - name: add
        help: add numbers
        args:
          - key: numbers
            type: int
            nargs: "+"

Types are given by name (`string`, `bool`, `int`, `float` and their aliases)
or as a dotted import path to a conversion function (`mypkg.types.port`).
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from argsmith.exceptions import SpecError
from argsmith.logger import logger
from argsmith.parser.parser_types import ArgType
from argsmith.parser.spec import CommandSpec


def import_type(dotted_path: str) -> Callable[[str], Any]:
    """Dynamically imports a conversion function from a path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise SpecError(f"Invalid type path: {dotted_path!r}")
    try:
        module = importlib.import_module(module_path)
    except ImportError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise SpecError(f"Could not import '{dotted_path}': {error}") from error
    try:
        func = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise SpecError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(func):
        raise SpecError(f"'{dotted_path}' is not callable")
    return func


def resolve_type_name(name: str) -> ArgType | Callable[[str], Any]:
    try:
        return ArgType(name)
    except ValueError:
        if "." not in name:
            raise SpecError(
                f"Unknown type '{name}'. Use one of: "
                f"{', '.join(str(member) for member in ArgType.choices())} "
                "or a dotted import path."
            ) from None
    return import_type(name)


class RawArgument(BaseModel):
    """Raw positional argument entry of a spec file."""

    model_config = ConfigDict(extra="forbid")

    key: str
    type: str = "string"
    nargs: str | int | None = None
    default: Any = None
    value_name: str | None = None
    help: str = ""


class RawOption(BaseModel):
    """Raw option entry of a spec file."""

    model_config = ConfigDict(extra="forbid")

    key: str
    short: str | None = None
    long: str | None = None
    type: str = "string"
    action: str = "store"
    default: Any = None
    value_name: str | None = None
    help: str = ""


class RawCommand(BaseModel):
    """Raw command entry of a spec file, subcommands included."""

    model_config = ConfigDict(extra="forbid")

    name: str
    summary: str = ""
    description: str = ""
    epilogue: str = ""
    help: str = ""
    args: list[RawArgument] = Field(default_factory=list)
    opts: list[RawOption] = Field(default_factory=list)
    cmds: list[RawCommand] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("command name must not be empty")
        return value

    def to_spec(self, parent_path: tuple[str, ...] = ()) -> CommandSpec:
        spec = CommandSpec(
            name=self.name,
            summary=self.summary,
            description=self.description,
            epilogue=self.epilogue,
            help=self.help,
            path=parent_path + (self.name,),
        )
        for arg in self.args:
            spec.add_argument(
                arg.key,
                type=resolve_type_name(arg.type),
                nargs=arg.nargs,
                default=arg.default,
                value_name=arg.value_name,
                help=arg.help,
            )
        for opt in self.opts:
            spec.add_option(
                opt.key,
                short=opt.short,
                long=opt.long,
                type=resolve_type_name(opt.type),
                action=opt.action,
                default=opt.default,
                value_name=opt.value_name,
                help=opt.help,
            )
        for cmd in self.cmds:
            spec.add_command(cmd.to_spec(spec.path))
        return spec


def load_spec(file_path: Path | str) -> CommandSpec:
    """
    Load a command spec from a YAML or TOML file.

    The root command name defaults to the file name without its suffix.

    Args:
        file_path (Path | str): Path to the spec file.

    Returns:
        CommandSpec: The validated command tree.

    Raises:
        SpecError: If the file is missing, unreadable or malformed.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise SpecError(f"No such spec file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as spec_file:
            if suffix in (".yaml", ".yml"):
                raw_spec = yaml.safe_load(spec_file)
            elif suffix == ".toml":
                raw_spec = toml.load(spec_file)
            else:
                raise SpecError(f"Unsupported spec format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        logger.error("Failed to read spec file '%s': %s", path, error)
        raise SpecError(f"Could not parse '{path}': {error}") from error

    if not isinstance(raw_spec, dict):
        raise SpecError(
            "Spec file must contain a mapping describing the root command.\n"
            "Example:\n"
            "name: 'calc'\n"
            "args:\n"
            "  - key: 'left'\n"
            "    type: 'int'"
        )

    raw_spec.setdefault("name", path.stem)
    try:
        raw_command = RawCommand(**raw_spec)
    except ValidationError as error:
        logger.error("Invalid spec file '%s': %s", path, error)
        raise SpecError(f"Invalid spec file '{path}':\n{error}") from error

    spec = raw_command.to_spec()
    logger.debug(
        "Loaded spec '%s' from '%s' with %d subcommand(s).",
        spec.name,
        path,
        len(spec.commands),
    )
    return spec
