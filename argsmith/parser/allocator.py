# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Stage 2 of parsing: distributes positional tokens over positional slots.

Each slot has an `Arity` (`1`, `?`, `*` or `+`). `assign_counts()` decides how
many tokens each slot consumes:

- Slots are filled left to right and each one takes as many tokens as it can
  while leaving enough for the minimum of the slots after it, so the leftmost
  unbounded slot is greedy:

      [+, 1]    with x y z  → [x y] [z]
      [?, 1, *] with a      → []    [a] []
      [+, +]    with x y z  → [x y] [z]

- When the tokens cannot satisfy every slot, trailing slots are dropped one at
  a time until they can. Dropped slots receive nothing, so each of them is
  reported as missing on its own rather than failing the whole list.

Specs should declare at most one unbounded slot, conventionally the last one.
With several, the split follows the leftmost-greedy rule above.
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Sequence

from argsmith.exceptions import CastError
from argsmith.parser.argument import Argument
from argsmith.parser.errors import (
    InvalidArgument,
    MissingArgument,
    ParseError,
    UnknownArgument,
)
from argsmith.parser.parser_types import Arity
from argsmith.parser.utils import coerce_value


@dataclass
class AllocationResult:
    """
    Attributes:
        values (dict[str, Any]): Positional values by key, in slot order.
        errors (list[ParseError]): Invalid and unknown tokens in encounter
            order, followed by missing slots in slot order.
    """

    values: dict[str, Any] = field(default_factory=dict)
    errors: list[ParseError] = field(default_factory=list)


def _match_counts(arities: Sequence[Arity], available: int) -> list[int] | None:
    """Backtracking search for a split of `available` tokens, largest count first."""
    if not arities:
        return []
    arity, rest = arities[0], arities[1:]
    reserved = sum(next_arity.min_count for next_arity in rest)
    upper = available - reserved
    if arity.max_count is not None:
        upper = min(upper, arity.max_count)
    for count in range(upper, arity.min_count - 1, -1):
        counts = _match_counts(rest, available - count)
        if counts is not None:
            return [count, *counts]
    return None


def assign_counts(token_count: int, arities: Sequence[Arity]) -> list[int]:
    """
    Decide how many tokens each slot consumes.

    Returns:
        list[int]: One count per slot that takes part in the split. The list
            is shorter than `arities` when trailing slots had to be dropped.
    """
    arities = list(arities)
    while arities:
        counts = _match_counts(arities, token_count)
        if counts is not None:
            return counts
        arities.pop()
    return []


def _cast_tokens(
    slot: Argument, tokens: list[str]
) -> tuple[list[Any], list[ParseError]]:
    values: list[Any] = []
    errors: list[ParseError] = []
    for token in tokens:
        try:
            values.append(coerce_value(token, slot.type))
        except CastError as error:
            errors.append(
                InvalidArgument(
                    slot.key,
                    token,
                    type=slot.type,
                    nargs=slot.nargs,
                    value_name=slot.value_name,
                    message=error.message,
                )
            )
    return values, errors


def _reduce_values(slot: Argument, values: list[Any]) -> Any:
    if slot.nargs is Arity.ONE:
        return values[0]
    elif slot.nargs is Arity.OPTIONAL:
        return values[0] if values else deepcopy(slot.default)
    elif slot.nargs is Arity.ZERO_OR_MORE:
        return values if values else deepcopy(slot.default)
    return values


def allocate_positionals(
    slots: Sequence[Argument], tokens: Sequence[str]
) -> AllocationResult:
    """
    Run stage 2: assign, cast and store positional tokens.

    A slot is stored only when every one of its tokens casts. A required slot
    left unfilled is reported as missing unless it already reported an invalid
    token; an optional slot left unfilled gets its default.
    """
    counts = assign_counts(len(tokens), [slot.nargs for slot in slots])
    filled: dict[str, Any] = {}
    invalid_keys: set[str] = set()
    errors: list[ParseError] = []

    position = 0
    for slot, count in zip(slots, counts):
        slot_tokens = list(tokens[position : position + count])
        position += count
        values, cast_errors = _cast_tokens(slot, slot_tokens)
        if cast_errors:
            errors.extend(cast_errors)
            invalid_keys.add(slot.key)
            continue
        filled[slot.key] = _reduce_values(slot, values)

    errors.extend(UnknownArgument(token) for token in tokens[position:])

    result = AllocationResult(errors=errors)
    for slot in slots:
        if slot.key in filled:
            result.values[slot.key] = filled[slot.key]
        elif slot.required:
            if slot.key not in invalid_keys:
                result.errors.append(
                    MissingArgument(
                        slot.key,
                        type=slot.type,
                        nargs=slot.nargs,
                        value_name=slot.value_name,
                    )
                )
        else:
            result.values[slot.key] = deepcopy(slot.default)
    return result
