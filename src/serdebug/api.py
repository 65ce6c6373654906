# topmark:header:start
#
#   project      : SerDebug
#   file         : api.py
#   file_relpath : src/serdebug/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public SerDebug API (stable surface).

Render any serializable value as debug text, without the value implementing a
debug interface of its own:

```python
from dataclasses import dataclass

from serdebug import api


@dataclass
class Point:
    x: int
    y: int


api.to_string(Point(1, 2))                  # 'Point { x: 1, y: 2 }'
api.to_string({"k": [1, 2]}, alternate=True)
f"{api.to_debug(Point(1, 2)):#}"            # pretty-printed
```

"Serializable" means either an object with a ``serialize(serializer)`` method
(see [`serdebug.ser.protocol`][]) or a plain Python value handled by
[`serdebug.ser.derive.serialize_value`][].

All entry points raise [`FormatError`][serdebug.errors.FormatError] when
rendering fails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from serdebug.adapter.visitor import SerializeDebug, to_formatter
from serdebug.fmt.formatter import Formatter
from serdebug.fmt.writers import BoundedWriter, StreamWriter, StringWriter

if TYPE_CHECKING:
    from typing import TextIO

    from serdebug.fmt.writers import Write

T = TypeVar("T")
_TD = TypeVar("_TD", bound="ToDebug")

__all__ = [
    "SerializeDebug",
    "ToDebug",
    "to_debug",
    "to_formatter",
    "to_string",
    "to_writer",
]


def to_debug(value: T) -> SerializeDebug[T]:
    """Wrap ``value`` so it can be used anywhere a debug-formattable value is expected.

    Args:
        value (T): Any serializable value.

    Returns:
        SerializeDebug[T]: A view rendering ``value`` on demand.
    """
    return SerializeDebug(value)


class ToDebug:
    """Mixin adding a ``to_debug()`` method to serializable classes."""

    def to_debug(self: _TD) -> SerializeDebug[_TD]:
        """Return a debug-formattable view of ``self``."""
        return SerializeDebug(self)


def to_string(value: object, *, alternate: bool = False, limit: int | None = None) -> str:
    """Render ``value`` as debug text.

    Args:
        value (object): Any serializable value.
        alternate (bool): Render pretty-printed output.
        limit (int | None): Maximum number of characters to produce.

    Returns:
        str: The debug text.

    Raises:
        FormatError: If rendering fails or the text would exceed ``limit``.
    """
    buf = StringWriter()
    sink: Write = buf if limit is None else BoundedWriter(buf, limit)
    to_formatter(value, Formatter(sink, alternate=alternate))
    return buf.getvalue()


def to_writer(value: object, stream: TextIO, *, alternate: bool = False) -> None:
    """Render ``value`` as debug text into a text stream.

    Args:
        value (object): Any serializable value.
        stream (TextIO): Destination stream.
        alternate (bool): Render pretty-printed output.

    Raises:
        FormatError: If rendering fails or the stream rejects the text.
    """
    to_formatter(value, Formatter(StreamWriter(stream), alternate=alternate))
