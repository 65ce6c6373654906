# topmark:header:start
#
#   project      : SerDebug
#   file         : map_state.py
#   file_relpath : src/serdebug/adapter/map_state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Map renderer and the key/value submission state machine.

The map framing builder only accepts a key together with its value, while the
serialization protocol also allows a key and its value on separate calls. The
renderer bridges the two by rendering an independently submitted key into a
reusable [`KeyBuffer`][serdebug.adapter.map_state.KeyBuffer] and writing it
out once the value arrives.

States:

```text
            serialize_key             serialize_value
    IDLE  ----------------> KEY_PENDING ------------> IDLE
     |  serialize_entry (stays IDLE)
     |
     +-- end() --> CLOSED   (also from KEY_PENDING; the key is dropped)
```

Rejected with [`Error`][serdebug.errors.Error], writing nothing for the entry:
a value while IDLE, a key or entry while KEY_PENDING, anything while CLOSED.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from serdebug.config.logging import get_logger
from serdebug.errors import Error, FormatError, sink_errors
from serdebug.fmt.formatter import Formatter, Raw
from serdebug.fmt.writers import StringWriter
from serdebug.ser.protocol import SerializeMap

if TYPE_CHECKING:
    from serdebug.adapter.compound import ElementFactory
    from serdebug.config.logging import SerdebugLogger
    from serdebug.fmt.builders import DebugMap
    from serdebug.fmt.formatter import Debug

logger: SerdebugLogger = get_logger(__name__)


class MapState(Enum):
    """Submission state of a map renderer."""

    IDLE = "idle"
    KEY_PENDING = "key_pending"
    CLOSED = "closed"


class KeyBuffer:
    """Reusable buffer holding the rendered text of one map key.

    Args:
        alternate (bool): Pretty-print mode inherited from the enclosing formatter.
    """

    def __init__(self, *, alternate: bool) -> None:
        self._alternate = alternate
        self._writer = StringWriter()

    def render(self, key: Debug) -> None:
        """Render ``key``, replacing any previous content.

        Raises:
            FormatError: If rendering the key fails; the buffer is left empty.
        """
        self._writer.clear()
        try:
            key.fmt_debug(Formatter(self._writer, alternate=self._alternate))
        except FormatError:
            self._writer.clear()
            raise

    def take(self) -> Raw:
        """Return the buffered key text and empty the buffer."""
        text = self._writer.getvalue()
        self._writer.clear()
        return Raw(text)

    def clear(self) -> None:
        self._writer.clear()


class MapRenderer(SerializeMap[None]):
    """Renders ``{k: v, ...}`` from combined or independent submissions.

    Args:
        builder (DebugMap): Framing builder of the enclosing formatter.
        element (ElementFactory): Wraps keys and values for nested rendering.
        alternate (bool): Whether the enclosing formatter pretty-prints.
    """

    def __init__(self, builder: DebugMap, element: ElementFactory, *, alternate: bool) -> None:
        self._map = builder
        self._element = element
        self._keys = KeyBuffer(alternate=alternate)
        self._state = MapState.IDLE

    @property
    def state(self) -> MapState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._state is MapState.CLOSED

    def _expect(self, state: MapState, operation: str) -> None:
        if self._state is not state:
            logger.debug("map %s rejected in state %s", operation, self._state.value)
            raise Error()

    def serialize_entry(self, key: object, value: object) -> None:
        self._expect(MapState.IDLE, "entry")
        with sink_errors():
            self._map.entry(self._element(key), self._element(value))

    def serialize_key(self, key: object) -> None:
        self._expect(MapState.IDLE, "key")
        with sink_errors():
            self._keys.render(self._element(key))
        self._state = MapState.KEY_PENDING

    def serialize_value(self, value: object) -> None:
        self._expect(MapState.KEY_PENDING, "value")
        key = self._keys.take()
        self._state = MapState.IDLE
        with sink_errors():
            self._map.entry(key, self._element(value))

    def end(self) -> None:
        if self._state is MapState.CLOSED:
            logger.debug("map closed twice")
            raise Error()
        if self._state is MapState.KEY_PENDING:
            # Lenient: a dangling key is dropped, not reported.
            logger.debug("map closed with a pending key; dropping it")
            self._keys.clear()
        self._state = MapState.CLOSED
        with sink_errors():
            self._map.finish()

    def abandon(self) -> None:
        self._keys.clear()
        self._state = MapState.CLOSED
