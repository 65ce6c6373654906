# topmark:header:start
#
#   project      : SerDebug
#   file         : writers.py
#   file_relpath : src/serdebug/fmt/writers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Append-only text sinks for the debug formatter.

Every sink implements the [`Write`][serdebug.fmt.writers.Write] protocol and
signals failure by raising [`FormatError`][serdebug.errors.FormatError]. A sink
never accepts part of a fragment: either the whole string is appended or the
call fails and nothing is written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from serdebug.errors import FormatError

if TYPE_CHECKING:
    from typing import TextIO


class Write(Protocol):
    """Append-only text sink."""

    def write_str(self, s: str) -> None:
        """Append ``s`` or raise `FormatError`."""
        ...


class StringWriter:
    """In-memory sink collecting fragments into a string."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._size: int = 0

    def write_str(self, s: str) -> None:
        if s:
            self._parts.append(s)
            self._size += len(s)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)

    def clear(self) -> None:
        """Drop the buffered text so the writer can be reused."""
        self._parts.clear()
        self._size = 0

    def __len__(self) -> int:
        return self._size


class StreamWriter:
    """Sink writing through to a text stream.

    Args:
        stream (TextIO): Destination stream, e.g. ``sys.stdout`` or an open file.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write_str(self, s: str) -> None:
        try:
            self._stream.write(s)
        except (OSError, ValueError) as exc:
            # ValueError: write to a closed file
            raise FormatError() from exc


class BoundedWriter:
    """Sink that fails once the total output would exceed ``limit`` characters.

    Args:
        inner (Write): Sink receiving the accepted text.
        limit (int): Maximum number of characters accepted over the writer's lifetime.

    Raises:
        ValueError: If ``limit`` is negative.
    """

    def __init__(self, inner: Write, limit: int) -> None:
        if limit < 0:
            raise ValueError(f"limit must be >= 0 (got {limit})")
        self._inner = inner
        self._limit = limit
        self._written = 0

    @property
    def remaining(self) -> int:
        """Number of characters that can still be written."""
        return self._limit - self._written

    def write_str(self, s: str) -> None:
        if len(s) > self.remaining:
            raise FormatError()
        self._inner.write_str(s)
        self._written += len(s)
