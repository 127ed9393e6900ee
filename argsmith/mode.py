# Argsmith CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseMode`, an enum selecting how options and positional arguments
may be mixed on the command line.
"""
from __future__ import annotations

from enum import Enum


class ParseMode(Enum):
    """
    INTERMIXED: GNU style. Options and positional arguments may appear in any
        order, `prog a -f b` equals `prog -f a b`.
    STRICT: POSIX style (`POSIXLY_CORRECT`). The first positional argument ends
        option parsing, `prog -f a -o v` equals `prog -f -- a -o v`.
    """

    INTERMIXED = "intermixed"
    STRICT = "strict"

    @classmethod
    def _missing_(cls, value: object) -> ParseMode:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: {value!r}. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value
