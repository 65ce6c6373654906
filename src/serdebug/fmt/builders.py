# topmark:header:start
#
#   project      : SerDebug
#   file         : builders.py
#   file_relpath : src/serdebug/fmt/builders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Nested framing scopes opened by a [`Formatter`][serdebug.fmt.formatter.Formatter].

Each builder writes its framing eagerly: the opening text when it is created,
separators and children as they are submitted, and the closing text on
``finish()``. Failures of the underlying sink propagate as
[`FormatError`][serdebug.errors.FormatError] from whichever call hit them.

Compact layout:

```text
[1, 2]        Name(1, 2)        (1,)        Name { a: 1 }        {"k": 1}
```

Alternate layout puts every child on its own line, indented by one level and
followed by a comma:

```text
Name {
    a: 1,
}
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from serdebug.fmt.formatter import Debug, Formatter


class DebugList:
    """Scope for a bracketed list of entries."""

    def __init__(self, fmt: Formatter) -> None:
        self._fmt = fmt
        self._has_fields = False
        fmt.write_str("[")

    def entry(self, value: Debug) -> DebugList:
        """Append one entry."""
        if self._fmt.alternate:
            if not self._has_fields:
                self._fmt.write_str("\n")
            writer = self._fmt.padded()
            value.fmt_debug(writer)
            writer.write_str(",\n")
        else:
            if self._has_fields:
                self._fmt.write_str(", ")
            value.fmt_debug(self._fmt)
        self._has_fields = True
        return self

    def entries(self, values: Iterable[Debug]) -> DebugList:
        """Append every entry of ``values`` in order."""
        for value in values:
            self.entry(value)
        return self

    def finish(self) -> None:
        """Close the list."""
        self._fmt.write_str("]")


class DebugTuple:
    """Scope for a named (or anonymous) tuple of positional fields."""

    def __init__(self, fmt: Formatter, name: str) -> None:
        self._fmt = fmt
        self._fields = 0
        self._empty_name = not name
        fmt.write_str(name)

    def field(self, value: Debug) -> DebugTuple:
        """Append one positional field."""
        if self._fmt.alternate:
            if self._fields == 0:
                self._fmt.write_str("(\n")
            writer = self._fmt.padded()
            value.fmt_debug(writer)
            writer.write_str(",\n")
        else:
            self._fmt.write_str("(" if self._fields == 0 else ", ")
            value.fmt_debug(self._fmt)
        self._fields += 1
        return self

    def finish(self) -> None:
        """Close the tuple. A tuple without fields writes only its name."""
        if self._fields > 0:
            # (x,) distinguishes a one-element tuple from a parenthesized value
            if self._fields == 1 and self._empty_name and not self._fmt.alternate:
                self._fmt.write_str(",")
            self._fmt.write_str(")")


class DebugStruct:
    """Scope for a struct with named fields."""

    def __init__(self, fmt: Formatter, name: str) -> None:
        self._fmt = fmt
        self._has_fields = False
        fmt.write_str(name)

    def field(self, name: str, value: Debug) -> DebugStruct:
        """Append one ``name: value`` field."""
        if self._fmt.alternate:
            if not self._has_fields:
                self._fmt.write_str(" {\n")
            writer = self._fmt.padded()
            writer.write_str(name)
            writer.write_str(": ")
            value.fmt_debug(writer)
            writer.write_str(",\n")
        else:
            self._fmt.write_str(", " if self._has_fields else " { ")
            self._fmt.write_str(name)
            self._fmt.write_str(": ")
            value.fmt_debug(self._fmt)
        self._has_fields = True
        return self

    def finish(self) -> None:
        """Close the struct. A struct without fields writes only its name."""
        if self._has_fields:
            self._fmt.write_str("}" if self._fmt.alternate else " }")


class DebugMap:
    """Scope for a braced map of key/value entries.

    Keys and values are always submitted together; callers producing them on
    separate calls must buffer the key themselves.
    """

    def __init__(self, fmt: Formatter) -> None:
        self._fmt = fmt
        self._has_fields = False
        fmt.write_str("{")

    def entry(self, key: Debug, value: Debug) -> DebugMap:
        """Append one ``key: value`` entry."""
        if self._fmt.alternate:
            if not self._has_fields:
                self._fmt.write_str("\n")
            writer = self._fmt.padded()
            key.fmt_debug(writer)
            writer.write_str(": ")
            value.fmt_debug(writer)
            writer.write_str(",\n")
        else:
            if self._has_fields:
                self._fmt.write_str(", ")
            key.fmt_debug(self._fmt)
            self._fmt.write_str(": ")
            value.fmt_debug(self._fmt)
        self._has_fields = True
        return self

    def finish(self) -> None:
        """Close the map."""
        self._fmt.write_str("}")
