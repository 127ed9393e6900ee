# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the Argsmith parse orchestrator: `parse()` and its
reusable form, `CommandParser`.

Parsing runs in two stages over one flattened command:

1. `OptionScanner` separates option tokens from positional tokens, casts and
   stores option values, and fills in option defaults.
2. `allocate_positionals()` distributes the positional tokens over the
   positional slots, casts them and fills in argument defaults.

Errors from both stages are accumulated (option errors first) and returned
with the values; bad user input never raises. A `ParseResult` can be turned
into an exception on request with `raise_for_errors()`.

Example Usage:
    parser = CommandParser(spec.resolve(["remote", "add"]))
    result = parser.parse_args(["-f", "origin", "git@host:repo.git"])
    if not result.ok:
        render_errors(result.errors)
"""
from __future__ import annotations

from typing import Any, NamedTuple, Sequence

from argsmith.exceptions import CommandArgumentError
from argsmith.logger import logger
from argsmith.mode import ParseMode
from argsmith.parser.allocator import allocate_positionals
from argsmith.parser.compiled_config import CompiledConfig, compile_config
from argsmith.parser.errors import ARGUMENT_ERRORS, OPTION_ERRORS, ParseError
from argsmith.parser.scanner import scan_options
from argsmith.parser.spec import CommandSpec

__all__ = [
    "CommandParser",
    "CompiledConfig",
    "ParseResult",
    "compile_config",
    "parse",
]


class ParseResult(NamedTuple):
    """
    The outcome of one parse call.

    Attributes:
        args (dict[str, Any]): Positional values by key, in slot order.
        opts (dict[str, Any]): Option values by key, in declaration order.
        errors (list[ParseError]): Every problem found, option errors first.
    """

    args: dict[str, Any]
    opts: dict[str, Any]
    errors: list[ParseError]

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def option_errors(self) -> list[ParseError]:
        return [error for error in self.errors if isinstance(error, OPTION_ERRORS)]

    @property
    def argument_errors(self) -> list[ParseError]:
        return [error for error in self.errors if isinstance(error, ARGUMENT_ERRORS)]

    def raise_for_errors(self) -> ParseResult:
        """Raise `CommandArgumentError` if the parse found any error."""
        if self.errors:
            raise CommandArgumentError(self.errors)
        return self


def _run(
    config: CompiledConfig, argv: Sequence[str], mode: ParseMode | str
) -> ParseResult:
    mode = ParseMode(mode)
    scanned = scan_options(config, argv, mode)
    allocated = allocate_positionals(config.positionals, scanned.positionals)
    errors = [*scanned.errors, *allocated.errors]
    logger.debug(
        "Parsed %r for '%s' in %s mode: %d error(s).",
        list(argv),
        " ".join(config.path),
        mode,
        len(errors),
    )
    return ParseResult(allocated.values, scanned.values, errors)


def parse(
    spec: CommandSpec | CompiledConfig,
    argv: Sequence[str],
    mode: ParseMode | str = ParseMode.INTERMIXED,
) -> ParseResult:
    """
    Parse an argument vector against one command.

    Args:
        spec (CommandSpec | CompiledConfig): The command to parse for. Use
            `CommandSpec.resolve()` first to parse for a subcommand.
        argv (Sequence[str]): The raw tokens, without the program name.
        mode (ParseMode | str): `"intermixed"` (default) or `"strict"`.

    Returns:
        ParseResult: `(args, opts, errors)`.
    """
    config = spec if isinstance(spec, CompiledConfig) else compile_config(spec)
    return _run(config, argv, mode)


class CommandParser:
    """
    Parses argument vectors for one command, compiling its spec only once.

    The compiled tables are read-only, so one parser may be shared between
    threads.
    """

    def __init__(self, spec: CommandSpec) -> None:
        self.spec = spec
        self.config = compile_config(spec)

    def parse_args(
        self,
        argv: Sequence[str],
        mode: ParseMode | str = ParseMode.INTERMIXED,
    ) -> ParseResult:
        return _run(self.config, argv, mode)

    def __repr__(self) -> str:
        return f"CommandParser(path={' '.join(self.config.path)!r})"
