"""String helpers with NUL-terminated string semantics."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]


def _as_char(c: CharLike) -> str:
    """Turn a one-character string or a character code into a character.

    Integer codes are reduced to a byte, as a C ``unsigned char`` would be.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _code_at(text: str, index: int) -> int:
    """Return the code at ``index``, or 0 past the end of the text."""
    return ord(text[index]) if index < len(text) else 0


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``text``.

    Looking for the NUL character gives the index of the terminator, which is
    the length of the text.  None is returned when ``c`` does not occur.
    """
    char = _as_char(c)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``text``.

    Looking for the NUL character gives the length of the text.  None is
    returned when ``c`` does not occur.
    """
    char = _as_char(c)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of differing character codes,
    with the end of a string counting as code 0, or 0 when the compared
    parts are equal.
    """
    if n < 1:
        return 0
    for index in range(n):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0 or index == n - 1:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` in the first ``length`` characters of ``haystack``.

    Returns the index where the match starts, 0 for an empty needle, or None
    when no match lies entirely within the first ``length`` characters.
    """
    if not needle:
        return 0
    limit = min(length, len(haystack))
    index = haystack.find(needle, 0, limit)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, so truncation shows when the length is >= ``size``.
    """
    if size < 1:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length it would have had with no
    truncation: ``min(size, len(dst)) + len(src)``.
    """
    start = min(size, len(dst))
    room = max(0, size - start - 1)
    return dst[:start] + src[:room], start + len(src)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("strjoin expects two strings")
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the separator character, dropping empty words."""
    separator = _as_char(sep)
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: Union[str, MutableSequence[str]],
    func: Callable[[int, str], Optional[str]],
) -> str:
    """Call ``func(index, char)`` for every character.

    A non-None return value replaces the character.  When ``text`` is a
    mutable sequence of characters it is updated in place.  The resulting
    string is returned.
    """
    chars = text if not isinstance(text, str) else list(text)
    for index, char in enumerate(list(chars)):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
    return "".join(chars)