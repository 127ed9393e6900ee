# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flattened, read-only lookup tables built from a `CommandSpec`.

`compile_config()` runs once per spec. The resulting `CompiledConfig` is never
mutated, so one instance may be shared between parse calls and threads.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from argsmith.logger import logger
from argsmith.parser.argument import Argument, Option

if TYPE_CHECKING:
    from argsmith.parser.spec import CommandSpec


@dataclass(frozen=True)
class CompiledConfig:
    """
    Attributes:
        path (tuple[str, ...]): Command path the config was built for.
        positionals (tuple[Argument, ...]): Positional slots in order.
        options (tuple[Option, ...]): Options in declaration order.
        short_options (Mapping[str, Option]): `"v"` → option.
        long_options (Mapping[str, Option]): `"verbose"` → option.
    """

    path: tuple[str, ...]
    positionals: tuple[Argument, ...]
    options: tuple[Option, ...]
    short_options: Mapping[str, Option]
    long_options: Mapping[str, Option]


def compile_config(spec: CommandSpec) -> CompiledConfig:
    """Build the lookup tables for one (already flattened) command spec."""
    short_options: dict[str, Option] = {}
    long_options: dict[str, Option] = {}
    for option in spec.options:
        if option.short:
            short_options[option.short] = option
        if option.long:
            long_options[option.long] = option

    config = CompiledConfig(
        path=tuple(spec.path) or (spec.name,),
        positionals=tuple(spec.arguments),
        options=tuple(spec.options),
        short_options=MappingProxyType(short_options),
        long_options=MappingProxyType(long_options),
    )
    logger.debug(
        "Compiled config for '%s': %d positional, %d short, %d long.",
        " ".join(config.path),
        len(config.positionals),
        len(short_options),
        len(long_options),
    )
    return config
