# topmark:header:start
#
#   project      : SerDebug
#   file         : test_writers.py
#   file_relpath : tests/fmt/test_writers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text sinks: in-memory, stream and bounded writers."""

from __future__ import annotations

import io

import pytest

from serdebug.errors import FormatError
from serdebug.fmt.writers import BoundedWriter, StreamWriter, StringWriter


def test_string_writer_collects_and_clears() -> None:
    """Fragments are concatenated; ``clear()`` empties the writer."""
    w = StringWriter()
    w.write_str("ab")
    w.write_str("")
    w.write_str("c")
    assert w.getvalue() == "abc"
    assert len(w) == 3
    w.clear()
    assert w.getvalue() == ""
    assert len(w) == 0


def test_stream_writer_writes_through() -> None:
    """Text reaches the wrapped stream immediately."""
    stream = io.StringIO()
    StreamWriter(stream).write_str("hello")
    assert stream.getvalue() == "hello"


def test_stream_writer_closed_stream_fails() -> None:
    """Writing to a closed stream is a sink failure."""
    stream = io.StringIO()
    stream.close()
    with pytest.raises(FormatError) as info:
        StreamWriter(stream).write_str("x")
    assert isinstance(info.value.__cause__, ValueError)


def test_bounded_writer_rejects_whole_fragment() -> None:
    """A fragment that does not fit is rejected entirely."""
    inner = StringWriter()
    w = BoundedWriter(inner, 5)
    w.write_str("abc")
    assert w.remaining == 2
    with pytest.raises(FormatError):
        w.write_str("def")
    assert inner.getvalue() == "abc"
    w.write_str("de")
    assert w.remaining == 0
    assert inner.getvalue() == "abcde"


def test_bounded_writer_zero_limit() -> None:
    """Only empty fragments fit into a zero limit."""
    w = BoundedWriter(StringWriter(), 0)
    w.write_str("")
    with pytest.raises(FormatError):
        w.write_str("x")


def test_bounded_writer_negative_limit() -> None:
    """A negative limit is a programming error."""
    with pytest.raises(ValueError):
        BoundedWriter(StringWriter(), -1)
