"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_DECIMAL = "0123456789"
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_CONSUMING = frozenset("cspdiuxX")


def to_base(number: int, digits: str) -> str:
    """Write a non-negative integer using ``digits`` as the digit alphabet."""
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    base = len(digits)
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def _to_int32(value: int) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def _pointer(arg: Any) -> str:
    if arg is None:
        return "(nil)"
    address = int(arg) if isinstance(arg, int) else id(arg)
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + to_base(address, _LOWER_HEX)


def format_conversion(spec: str, arg: Any = None) -> str:
    """Return the text for one conversion; unknown conversions give ''."""
    if spec == "c":
        return _char(arg)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        return _pointer(arg)
    if spec in ("d", "i"):
        return str(_to_int32(arg))
    if spec == "u":
        return to_base(int(arg) & _UINT_MASK, _DECIMAL)
    if spec == "x":
        return to_base(int(arg) & _UINT_MASK, _LOWER_HEX)
    if spec == "X":
        return to_base(int(arg) & _UINT_MASK, _UPPER_HEX)
    if spec == "%":
        return "%"
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text."""
    remaining = iter(args)
    out = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in _CONSUMING:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for format string {fmt!r}"
                ) from None
            out.append(format_conversion(spec, arg))
        else:
            out.append(format_conversion(spec))
    return "".join(out)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expanded format to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)