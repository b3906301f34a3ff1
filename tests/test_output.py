import io
import os

import pytest

from pipeline_runner.output import write_char, write_line, write_number, write_str


def _read_all(fd):
    chunks = []
    while True:
        chunk = os.read(fd, 1024)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def test_write_char_to_stream():
    stream = io.StringIO()
    write_char("x", stream)
    write_char("y", stream)
    assert stream.getvalue() == "xy"


def test_write_char_rejects_longer_text():
    with pytest.raises(ValueError):
        write_char("ab", io.StringIO())


def test_write_char_rejects_empty_text():
    with pytest.raises(ValueError):
        write_char("", io.StringIO())


def test_write_str_writes_text_unchanged():
    stream = io.StringIO()
    write_str("heredoc > ", stream)
    assert stream.getvalue() == "heredoc > "


def test_write_str_rejects_none():
    with pytest.raises(TypeError):
        write_str(None, io.StringIO())


def test_write_line_appends_newline():
    stream = io.StringIO()
    write_line("hello", stream)
    assert stream.getvalue() == "hello" + "\n"


@pytest.mark.parametrize("number", [0, 7, -7, 42, 2147483647, -2147483648])
def test_write_number_round_trips(number):
    stream = io.StringIO()
    write_number(number, stream)
    assert int(stream.getvalue()) == number


def test_write_number_minimum():
    stream = io.StringIO()
    write_number(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


@pytest.mark.parametrize("number", [2**31, -(2**31) - 1])
def test_write_number_out_of_range(number):
    with pytest.raises(OverflowError):
        write_number(number, io.StringIO())


def test_writes_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        write_str("abc", write_fd)
        write_char("-", write_fd)
        write_number(-15, write_fd)
        write_line("", write_fd)
    finally:
        os.close(write_fd)
    try:
        assert _read_all(read_fd) == b"abc--15\n"
    finally:
        os.close(read_fd)


def test_writes_unicode_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        write_line("héllo", write_fd)
    finally:
        os.close(write_fd)
    try:
        assert _read_all(read_fd).decode("utf-8") == "héllo\n"
    finally:
        os.close(read_fd)