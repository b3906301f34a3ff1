"""String helpers with C-style edge-case rules.

Positions are returned as indices into the text, with ``None`` for
"not found". A search for the NUL character ``"\\0"`` finds the position
just past the end of the text, where a terminator would sit.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def split(text: Optional[str], sep: str) -> Optional[list[str]]:
    """Split ``text`` on ``sep``, dropping empty words.

    Runs of separators and separators at either end produce no empty
    entries. ``None`` text gives ``None``.
    """
    if text is None:
        return None
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or ``None``."""
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or ``None``."""
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    The end of a string compares as code 0. The result is the difference of
    the codes at the first mismatch, or 0 when the prefixes are equal.
    """
    _check_non_negative("n", n)
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``; a truncated copy
    is detected by the length being at least ``size``.
    """
    _check_non_negative("size", size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` slots.

    Returns the resulting text and the length the result would have had
    with unlimited space. When ``size`` does not exceed ``len(dst)``,
    ``dst`` is left as is and the length is ``len(src) + size``.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, len(src) + size
    return dst + src[: size - len(dst) - 1], len(dst) + len(src)


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent."""
    if first is None:
        return second
    if second is None:
        return first
    return first + second


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if text is None:
        return None
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        return None
    return text.strip(charset) if charset else text


def strmapi(text: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """Build a new string from ``func(index, char)`` for every character."""
    if text is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: Optional[MutableSequence],
    func: Callable[[int, MutableSequence], None],
) -> None:
    """Call ``func(index, chars)`` for every position, letting it edit in place."""
    if chars is None:
        return
    for index in range(len(chars)):
        func(index, chars)