"""Writing characters, strings and numbers to a stream or file descriptor."""

from __future__ import annotations

import os
from typing import TextIO, Union

from .chars import itoa

Stream = Union[TextIO, int]


def _emit(stream: Stream, text: str) -> None:
    if isinstance(stream, bool):
        raise TypeError("stream must be a file descriptor or a text stream")
    if isinstance(stream, int):
        data = text.encode("utf-8", "surrogateescape")
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def write_char(c: str, stream: Stream) -> None:
    """Write one character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _emit(stream, c)


def write_str(text: str, stream: Stream) -> None:
    """Write a string as is."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    _emit(stream, text)


def write_line(text: str, stream: Stream) -> None:
    """Write a string followed by a newline."""
    write_str(text, stream)
    _emit(stream, "\n")


def write_number(n: int, stream: Stream) -> None:
    """Write a 32-bit signed integer in decimal."""
    _emit(stream, itoa(n))