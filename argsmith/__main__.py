"""
Argsmith CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Any, Sequence

from rich.text import Text

from argsmith.config import load_spec
from argsmith.console import console
from argsmith.exceptions import SpecError
from argsmith.feedback import render_errors, render_help
from argsmith.mode import ParseMode
from argsmith.parser import CommandParser, CommandSpec, ParseResult, UnknownArgument
from argsmith.utils import get_program_invocation, setup_logging

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE = 2


def get_root_spec(program: str | None = None) -> CommandSpec:
    root = CommandSpec(
        program or get_program_invocation(),
        summary="Parse command lines against declarative command specs.",
        epilogue="Spec files are YAML (.yaml, .yml) or TOML (.toml).",
    )
    root.add_option(
        "verbose",
        short="v",
        long="verbose",
        type="bool",
        action="count",
        help="increase log verbosity",
    )
    root.add_option(
        "log_mode",
        long="log-mode",
        value_name="MODE",
        help="log output: cli or json",
    )
    root.add_option("help", short="h", long="help", type="bool", help="show help")
    root.add_argument("command")
    root.add_argument("rest", nargs="*", value_name="ARGS")

    help_spec = CommandSpec(
        "help",
        summary="Show the help of a spec file's command.",
        help="show the help of a (sub)command",
    )
    help_spec.add_option("help", short="h", long="help", type="bool", help="show help")
    help_spec.add_argument("spec_file", help="YAML or TOML spec file")
    help_spec.add_argument(
        "command", nargs="*", help="subcommand path below the root command"
    )
    root.add_command(help_spec)

    parse_spec = CommandSpec(
        "parse",
        summary="Parse an argument vector against a spec file and print JSON.",
        help="parse arguments and print the result",
        epilogue="Exits with status 1 when the argument vector has errors.",
    )
    parse_spec.add_option("help", short="h", long="help", type="bool", help="show help")
    parse_spec.add_option(
        "strict",
        long="strict",
        type="bool",
        help="stop option parsing at the first positional argument",
    )
    parse_spec.add_option(
        "command",
        short="c",
        long="command",
        action="append",
        help="subcommand to parse for, repeat for nested subcommands",
    )
    parse_spec.add_argument("spec_file", help="YAML or TOML spec file")
    parse_spec.add_argument("argv", nargs="*", help="arguments to parse")
    root.add_command(parse_spec)
    return root


def _console_level(verbose: int) -> int:
    return max(logging.WARNING - 10 * verbose, logging.DEBUG)


def print_error(message: str) -> None:
    console.print(Text(message, style="argsmith.error"), soft_wrap=True)


def run_help(spec: CommandSpec, result: ParseResult) -> int:
    try:
        target = load_spec(result.args["spec_file"])
        render_help(target, result.args["command"])
    except SpecError as error:
        print_error(str(error))
        return EXIT_USAGE
    return EXIT_OK


def run_parse(spec: CommandSpec, result: ParseResult) -> int:
    mode = ParseMode.STRICT if result.opts["strict"] else ParseMode.INTERMIXED
    try:
        target = load_spec(result.args["spec_file"]).resolve(result.opts["command"])
    except SpecError as error:
        print_error(str(error))
        return EXIT_USAGE

    parsed = CommandParser(target).parse_args(result.args["argv"], mode=mode)
    if not parsed.ok:
        render_errors(parsed.errors)
        return EXIT_PARSE_ERROR

    payload: dict[str, Any] = {
        "command": list(target.path),
        "args": parsed.args,
        "opts": parsed.opts,
    }
    console.print_json(data=payload, default=str)
    return EXIT_OK


RUNNERS = {
    "help": run_help,
    "parse": run_parse,
}


def main(argv: Sequence[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    root = get_root_spec()

    result = CommandParser(root).parse_args(argv, mode=ParseMode.STRICT)
    try:
        setup_logging(
            mode=result.opts["log_mode"],
            console_log_level=_console_level(result.opts["verbose"]),
        )
    except ValueError as error:
        print_error(str(error))
        return EXIT_USAGE
    if result.opts["help"]:
        render_help(root)
        return EXIT_OK
    if not result.ok:
        render_errors(result.errors)
        return EXIT_USAGE

    command = root.get_command(result.args["command"])
    if command is None:
        render_errors([UnknownArgument(result.args["command"])])
        return EXIT_USAGE

    sub_result = CommandParser(command).parse_args(
        result.args["rest"], mode=ParseMode.STRICT
    )
    if sub_result.opts["help"]:
        render_help(command)
        return EXIT_OK
    if not sub_result.ok:
        render_errors(sub_result.errors)
        return EXIT_USAGE
    return RUNNERS[command.name](command, sub_result)


if __name__ == "__main__":
    sys.exit(main())
