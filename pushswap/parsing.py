"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence

from pushswap.strings import split

INT_MIN = -2147483648
INT_MAX = 2147483647

_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised for input that is not a list of distinct 32-bit integers."""


def split_words(text: str, sep: str = " ") -> List[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    return split(text, sep)


def is_valid_number(token: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits."""
    return _NUMBER.fullmatch(token) is not None


def parse_number(token: str) -> int:
    """Parse ``token`` as a 32-bit signed integer."""
    if not is_valid_number(token):
        raise InputError(f"not a number: {token!r}")
    number = int(token)
    if not INT_MIN <= number <= INT_MAX:
        raise InputError(f"out of range: {token!r}")
    return number


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Turn command-line arguments into a list of distinct integers.

    A single argument is split on spaces; several arguments are taken one
    number each.
    """
    tokens: Iterable[str] = split_words(args[0], " ") if len(args) == 1 else args
    numbers: List[int] = []
    seen = set()
    for token in tokens:
        number = parse_number(token)
        if number in seen:
            raise InputError(f"duplicate number: {number}")
        seen.add(number)
        numbers.append(number)
    return numbers