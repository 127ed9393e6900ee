# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Stage 1 of parsing: separates option tokens from positional tokens.

`OptionScanner` walks the argument vector left to right with one token of
lookahead and supports the POSIX and GNU getopt syntax:

    -f                  short flag
    -o value            short option, value in the next token
    -ovalue             short option, inline value
    -abc                clustered flags, same as -a -b -c
    -abcovalue          clustered flags ending with an option and its value
    --flag              long flag
    --option value      long option, value in the next token
    --option=value      long option, inline value
    --no-flag           negated boolean long option
    --                  option terminator, everything after it is positional
    -                   a lone dash is an ordinary positional token

A value-taking option consumes the next token whatever it looks like, so
`--name --verbose` stores "--verbose" as the name.

Tokens shaped like negative numbers (`-5`, `-3.14`) are positional unless the
digit after the dash is itself a declared short option.

Problems are recorded as `ParseError` values; scanning always runs to the end.
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Sequence

from argsmith.exceptions import CastError
from argsmith.mode import ParseMode
from argsmith.parser.argument import Option
from argsmith.parser.argument_action import OptionAction
from argsmith.parser.compiled_config import CompiledConfig
from argsmith.parser.errors import (
    InvalidOptionValue,
    MissingOptionValue,
    ParseError,
    UnknownOption,
)
from argsmith.parser.tagger import OptionKind, TaggedOption, tag_option
from argsmith.parser.utils import coerce_value

OPTION_TERMINATOR = "--"
SHORT_PREFIX = "-"
LONG_PREFIX = "--"


@dataclass
class ScanResult:
    """
    Attributes:
        positionals (list[str]): Tokens left for positional allocation, in order.
        values (dict[str, Any]): Option values by key, defaults filled in.
        errors (list[ParseError]): Option errors in encounter order.
    """

    positionals: list[str] = field(default_factory=list)
    values: dict[str, Any] = field(default_factory=dict)
    errors: list[ParseError] = field(default_factory=list)


class OptionScanner:
    """
    Scans an argument vector for options.

    In `ParseMode.INTERMIXED` positional tokens may appear anywhere. In
    `ParseMode.STRICT` the first positional token ends option scanning and it
    and every following token are kept as positional tokens.
    """

    def __init__(
        self, config: CompiledConfig, mode: ParseMode = ParseMode.INTERMIXED
    ) -> None:
        self.config = config
        self.mode = mode

    def scan(self, argv: Sequence[str]) -> ScanResult:
        args = list(argv)
        result = ScanResult()

        i = 0
        while i < len(args):
            token = args[i]
            if token == OPTION_TERMINATOR:
                result.positionals.extend(args[i + 1 :])
                break
            elif self._is_long_option(token):
                i = self._handle_long_option(token, args, i + 1, result)
            elif self._is_short_option(token):
                i = self._handle_short_options(token, args, i + 1, result)
            elif self.mode is ParseMode.STRICT:
                result.positionals.extend(args[i:])
                break
            else:
                result.positionals.append(token)
                i += 1

        result.values = self._fill_defaults(result.values)
        return result

    def _is_long_option(self, token: str) -> bool:
        return token.startswith(LONG_PREFIX) and len(token) > len(LONG_PREFIX)

    def _is_short_option(self, token: str) -> bool:
        if not token.startswith(SHORT_PREFIX) or len(token) < 2:
            return False
        first = token[1]
        if first.isdigit() and first not in self.config.short_options:
            return False
        return True

    def _handle_long_option(
        self, token: str, args: list[str], i: int, result: ScanResult
    ) -> int:
        name, _, inline_value = token[len(LONG_PREFIX) :].partition("=")
        prefixed_name = f"{LONG_PREFIX}{name}"
        tagged = tag_option(self.config, OptionKind.LONG, name)
        if tagged is None:
            result.errors.append(UnknownOption(prefixed_name))
            return i
        return self._apply_option(
            tagged, prefixed_name, inline_value or None, args, i, result
        )

    def _handle_short_options(
        self, token: str, args: list[str], i: int, result: ScanResult
    ) -> int:
        chars = token[len(SHORT_PREFIX) :]
        for index, char in enumerate(chars):
            prefixed_name = f"{SHORT_PREFIX}{char}"
            tagged = tag_option(self.config, OptionKind.SHORT, char)
            if tagged is None:
                result.errors.append(UnknownOption(prefixed_name))
                break
            if tagged.takes_value:
                # the rest of the cluster, if any, is this option's value
                rest = chars[index + 1 :]
                return self._apply_option(
                    tagged, prefixed_name, rest or None, args, i, result
                )
            i = self._apply_option(tagged, prefixed_name, None, args, i, result)
        return i

    def _apply_option(
        self,
        tagged: TaggedOption,
        prefixed_name: str,
        value: str | None,
        args: list[str],
        i: int,
        result: ScanResult,
    ) -> int:
        option = tagged.option
        if tagged.takes_value and value is None:
            if i >= len(args):
                result.errors.append(
                    MissingOptionValue(
                        prefixed_name,
                        key=option.key,
                        type=option.type,
                        action=option.action,
                        value_name=option.value_name,
                    )
                )
                return i
            value = args[i]
            i += 1

        try:
            typed_value = coerce_value(value, option.type, negated=tagged.negated)
        except CastError as error:
            result.errors.append(
                InvalidOptionValue(
                    prefixed_name,
                    str(value),
                    key=option.key,
                    type=option.type,
                    action=option.action,
                    value_name=option.value_name,
                    message=error.message,
                )
            )
            return i

        self._store(result.values, option, typed_value)
        return i

    def _store(self, values: dict[str, Any], option: Option, value: Any) -> None:
        if option.action is OptionAction.COUNT:
            values[option.key] = values.get(option.key, 0) + 1
        elif option.action is OptionAction.APPEND:
            values.setdefault(option.key, []).append(value)
        else:
            values[option.key] = value

    def _fill_defaults(self, values: dict[str, Any]) -> dict[str, Any]:
        return {
            option.key: (
                values[option.key] if option.key in values else deepcopy(option.default)
            )
            for option in self.config.options
        }


def scan_options(
    config: CompiledConfig,
    argv: Sequence[str],
    mode: ParseMode = ParseMode.INTERMIXED,
) -> ScanResult:
    """Run stage 1 over `argv`."""
    return OptionScanner(config, mode).scan(argv)
