"""Write characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import Optional, TextIO, Union

CharLike = Union[str, int]


def _as_char(c: CharLike) -> str:
    """Turn a one-character string or a character code into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def putchar_fd(c: CharLike, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_as_char(c))


def putstr_fd(text: Optional[str], stream: Optional[TextIO]) -> None:
    """Write ``text`` to ``stream``; nothing is written for a missing text or stream."""
    if text is None or stream is None:
        return
    stream.write(text)


def putendl_fd(text: Optional[str], stream: Optional[TextIO]) -> None:
    """Write ``text`` followed by a newline; nothing for a missing text or stream."""
    if text is None or stream is None:
        return
    stream.write(text + "\n")


def putnbr_fd(n: int, stream: Optional[TextIO]) -> None:
    """Write the decimal representation of ``n``; nothing for a missing stream."""
    if stream is None:
        return
    stream.write(str(int(n)))