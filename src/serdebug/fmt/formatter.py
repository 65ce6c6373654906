# topmark:header:start
#
#   project      : SerDebug
#   file         : formatter.py
#   file_relpath : src/serdebug/fmt/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Structured-text formatter used as the debug rendering target.

A [`Formatter`][serdebug.fmt.formatter.Formatter] wraps one
[`Write`][serdebug.fmt.writers.Write] sink and carries the formatting options
(currently only the *alternate* flag that selects pretty-printed output). It
opens nested framing scopes for lists, tuples, named-field structs and maps;
see [`serdebug.fmt.builders`][].

Pretty-printed scopes write their children through a
[`PadAdapter`][serdebug.fmt.formatter.PadAdapter], which indents every line it
receives by one level. Nesting adapters nests the indentation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from serdebug.constants import INDENT
from serdebug.fmt.builders import DebugList, DebugMap, DebugStruct, DebugTuple
from serdebug.fmt.writers import StringWriter

if TYPE_CHECKING:
    from collections.abc import Iterator

    from serdebug.fmt.writers import Write


class Debug(Protocol):
    """A value that can write its own debug text into a formatter."""

    def fmt_debug(self, f: Formatter) -> None:
        """Write the debug text of ``self`` into ``f``."""
        ...


def _split_inclusive(s: str) -> Iterator[str]:
    """Yield the lines of ``s``, each keeping its trailing ``\\n``."""
    start = 0
    while start < len(s):
        end = s.find("\n", start)
        if end == -1:
            yield s[start:]
            return
        yield s[start : end + 1]
        start = end + 1


class PadAdapter:
    """Sink indenting every line written through it by one level.

    The adapter starts at the beginning of a line, so the first fragment is
    indented as well.
    """

    def __init__(self, inner: Write) -> None:
        self._inner = inner
        self._on_newline = True

    def write_str(self, s: str) -> None:
        for line in _split_inclusive(s):
            if self._on_newline:
                self._inner.write_str(INDENT)
            self._on_newline = line.endswith("\n")
            self._inner.write_str(line)


class Raw:
    """Debug value writing pre-rendered text verbatim."""

    def __init__(self, text: str) -> None:
        self.text = text

    def fmt_debug(self, f: Formatter) -> None:
        f.write_str(self.text)

    def __repr__(self) -> str:
        return f"Raw({self.text!r})"


class Formatter:
    """Output sink plus formatting options.

    Args:
        buf (Write): Destination for the rendered text.
        alternate (bool): Select pretty-printed (multi-line, indented) output.
    """

    def __init__(self, buf: Write, *, alternate: bool = False) -> None:
        self._buf = buf
        self._alternate = alternate

    @property
    def alternate(self) -> bool:
        """Whether pretty-printed output was requested."""
        return self._alternate

    def write_str(self, s: str) -> None:
        """Append raw text to the sink.

        Raises:
            FormatError: If the sink rejects the text.
        """
        self._buf.write_str(s)

    def wrap(self, buf: Write) -> Formatter:
        """Return a formatter over ``buf`` with the same options as ``self``."""
        return Formatter(buf, alternate=self._alternate)

    def padded(self) -> Formatter:
        """Return a formatter writing through a fresh one-level `PadAdapter`."""
        return self.wrap(PadAdapter(self._buf))

    def debug_list(self) -> DebugList:
        """Open a ``[a, b]`` scope."""
        return DebugList(self)

    def debug_tuple(self, name: str) -> DebugTuple:
        """Open a ``Name(a, b)`` scope; an empty name yields a plain tuple."""
        return DebugTuple(self, name)

    def debug_struct(self, name: str) -> DebugStruct:
        """Open a ``Name { a: 1 }`` scope."""
        return DebugStruct(self, name)

    def debug_map(self) -> DebugMap:
        """Open a ``{k: v}`` scope."""
        return DebugMap(self)


def format_debug(value: Debug, *, alternate: bool = False) -> str:
    """Render ``value`` into a new string.

    Args:
        value (Debug): The value to render.
        alternate (bool): Render pretty-printed output.

    Returns:
        str: The debug text.
    """
    buf = StringWriter()
    value.fmt_debug(Formatter(buf, alternate=alternate))
    return buf.getvalue()
