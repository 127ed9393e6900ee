# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Generates help text and error messages from a `CommandSpec`.

Help layout (empty sections are omitted, sections are separated by a blank
line):

    A simple calculator.                       ← summary

    Longer description, word-wrapped.          ← description

    Usage:
      calc <COMMAND> [OPTIONS]

    Commands:
      add    add two numbers
      minus  subtract two numbers

    Arguments:
      <LEFT>   the left number

    Options:
      -d, --debug       enable debug logging
      -v, --verbose...  specify verbose level

    Closing remarks.                           ← epilogue

Functions:
- help: Build the help text for a command or subcommand.
- format_error / format_errors: Turn `ParseError` values into messages.
- render_help / render_errors: Print through the shared rich console.
"""
from __future__ import annotations

from typing import Sequence

from rich.text import Text

from argsmith.console import console
from argsmith.formatter import format_columns, format_text
from argsmith.parser.errors import (
    InvalidArgument,
    InvalidOptionValue,
    MissingArgument,
    MissingOptionValue,
    ParseError,
    UnknownArgument,
    UnknownOption,
)
from argsmith.parser.parser_types import Arity
from argsmith.parser.spec import CommandSpec
from argsmith.utils import get_terminal_width

LEFT_PADDING = 2
SEPARATOR = 2

_HEADERS = ("Usage:", "Commands:", "Arguments:", "Options:")


def _format_rows(header: str, rows: list[tuple[str, str]], width: int) -> str | None:
    if not rows:
        return None
    name_width = max(len(name) for name, _ in rows)
    help_width = width - LEFT_PADDING - name_width - SEPARATOR
    lines = [
        format_columns(
            [
                ("", LEFT_PADDING),
                (name, name_width),
                ("", SEPARATOR),
                (help_text.rstrip(), help_width),
            ]
        )
        for name, help_text in rows
    ]
    return "\n".join([header, *lines])


def _build_usage(spec: CommandSpec) -> str:
    parts = [" ".join(spec.path)]
    if spec.commands:
        parts.append("<COMMAND>")
    if spec.options:
        parts.append("[OPTIONS]")
    parts.extend(argument.get_placeholder() for argument in spec.arguments)
    return "Usage:\n" + " " * LEFT_PADDING + " ".join(parts)


def help(
    spec: CommandSpec, subcmd_path: Sequence[str] = (), width: int | None = None
) -> str:
    """
    Build the help text for `spec`, or for the subcommand at `subcmd_path`.

    Args:
        spec (CommandSpec): The root command.
        subcmd_path (Sequence[str]): Subcommand names below the root.
        width (int | None): Line width. Defaults to the terminal width, capped
            at 98 columns.

    Raises:
        SpecError: If `subcmd_path` does not name a subcommand.
    """
    command = spec.resolve(subcmd_path)
    width = width if width is not None else get_terminal_width()

    sections = [
        format_text(command.summary, width) if command.summary else None,
        format_text(command.description, width) if command.description else None,
        _build_usage(command),
        _format_rows(
            "Commands:", [(cmd.name, cmd.help) for cmd in command.commands], width
        ),
        _format_rows(
            "Arguments:",
            [(arg.get_placeholder(), arg.help) for arg in command.arguments],
            width,
        ),
        _format_rows(
            "Options:",
            [(opt.get_flag_text(), opt.help) for opt in command.options],
            width,
        ),
        format_text(command.epilogue, width) if command.epilogue else None,
    ]
    return "\n\n".join(section for section in sections if section)


def _argument_placeholder(value_name: str | None, nargs: Arity | None) -> str:
    value_name = value_name or "VALUE"
    if nargs is Arity.OPTIONAL:
        return f"[{value_name}]"
    elif nargs is Arity.ZERO_OR_MORE:
        return f"[{value_name}]..."
    elif nargs is Arity.ONE_OR_MORE:
        return f"<{value_name}>..."
    return f"<{value_name}>"


def _with_message(text: str, message: str | None) -> str:
    return f"{text}: {message}" if message else text


def format_error(error: ParseError) -> str:
    """
    Format one parse error.

    Example:
        format_error(UnknownOption("--x")) → "unknown option '--x'"
    """
    if isinstance(error, UnknownOption):
        return f"unknown option '{error.token}'"
    elif isinstance(error, MissingOptionValue):
        value_name = error.value_name or "VALUE"
        return f"missing value for option '{error.token} <{value_name}>'"
    elif isinstance(error, InvalidOptionValue):
        value_name = error.value_name or "VALUE"
        return _with_message(
            f"invalid value '{error.value}' for option '{error.token} <{value_name}>'",
            error.message,
        )
    elif isinstance(error, UnknownArgument):
        return f"unrecognized argument '{error.token}'"
    elif isinstance(error, MissingArgument):
        placeholder = _argument_placeholder(
            error.value_name or error.key.upper(), error.nargs
        )
        return f"missing value for argument '{placeholder}'"
    elif isinstance(error, InvalidArgument):
        placeholder = _argument_placeholder(
            error.value_name or error.key.upper(), error.nargs
        )
        return _with_message(
            f"invalid value '{error.value}' for argument '{placeholder}'",
            error.message,
        )
    raise TypeError(f"Unsupported parse error: {error!r}")


def format_errors(errors: Sequence[ParseError]) -> str:
    """Format every error below an `N error(s) found!` line."""
    lines = [f"{len(errors)} error(s) found!"]
    lines.extend(f"  {format_error(error)}" for error in errors)
    return "\n".join(lines)


def render_help(
    spec: CommandSpec, subcmd_path: Sequence[str] = (), width: int | None = None
) -> None:
    """Print the help text through the Argsmith console, headers highlighted."""
    text = Text(help(spec, subcmd_path, width))
    for header in _HEADERS:
        text.highlight_words([header], style="argsmith.header")
    text.highlight_regex(r"<[A-Z0-9_]+>(?:\.\.\.)?", style="argsmith.placeholder")
    console.print(text, soft_wrap=True)


def render_errors(errors: Sequence[ParseError]) -> None:
    console.print(Text(format_errors(errors), style="argsmith.error"), soft_wrap=True)
