"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

import re

_WHITESPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"([+-]?)([0-9]*)")


def _code(c: str | int) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def isalpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def isalnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _same_kind(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def toupper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return _same_kind(c, code)


def tolower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return _same_kind(c, code)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    One optional sign is accepted; parsing stops at the first non-digit.
    Text with no digits gives 0.
    """
    match = _NUMBER.match(text.lstrip(_WHITESPACE))
    sign, digits = match.groups()
    if not digits:
        return 0
    number = int(digits)
    return -number if sign == "-" else number


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))