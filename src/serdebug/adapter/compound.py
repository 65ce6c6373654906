# topmark:header:start
#
#   project      : SerDebug
#   file         : compound.py
#   file_relpath : src/serdebug/adapter/compound.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compound builders turning sequence, tuple and struct events into debug text.

Each renderer owns one framing builder from [`serdebug.fmt.builders`][] and
wraps every submitted child with the element factory it was created with. The
factory produces a [`Debug`][serdebug.fmt.formatter.Debug] value that runs the
child back through a fresh serializer, so nesting depth follows the value.

A renderer is closed exactly once. Submitting to a closed renderer or closing
it again raises [`Error`][serdebug.errors.Error].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

from serdebug.config.logging import get_logger
from serdebug.errors import Error, sink_errors
from serdebug.ser.protocol import (
    SerializeCompound,
    SerializeSeq,
    SerializeStruct,
    SerializeStructVariant,
    SerializeTuple,
    SerializeTupleStruct,
    SerializeTupleVariant,
)

if TYPE_CHECKING:
    from serdebug.config.logging import SerdebugLogger
    from serdebug.fmt.builders import DebugList, DebugStruct, DebugTuple
    from serdebug.fmt.formatter import Debug

logger: SerdebugLogger = get_logger(__name__)

ElementFactory = Callable[[object], "Debug"]


class _Finish(Protocol):
    def finish(self) -> None: ...


class _CompoundRenderer(SerializeCompound[None]):
    """Closed-once lifecycle shared by all renderers."""

    def __init__(self, builder: _Finish, element: ElementFactory) -> None:
        self._builder = builder
        self._element = element
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            logger.debug("%s used after it was closed", type(self).__name__)
            raise Error()

    def end(self) -> None:
        self._ensure_open()
        self._closed = True
        with sink_errors():
            self._builder.finish()

    def abandon(self) -> None:
        self._closed = True


class SeqRenderer(_CompoundRenderer, SerializeSeq[None]):
    """Renders ``[a, b]``."""

    def __init__(self, builder: DebugList, element: ElementFactory) -> None:
        super().__init__(builder, element)
        self._list = builder

    def serialize_element(self, value: object) -> None:
        self._ensure_open()
        with sink_errors():
            self._list.entry(self._element(value))


class _TupleRenderer(_CompoundRenderer):
    def __init__(self, builder: DebugTuple, element: ElementFactory) -> None:
        super().__init__(builder, element)
        self._tuple = builder

    def _push(self, value: object) -> None:
        self._ensure_open()
        with sink_errors():
            self._tuple.field(self._element(value))


class TupleRenderer(_TupleRenderer, SerializeTuple[None]):
    """Renders ``(a, b)``."""

    def serialize_element(self, value: object) -> None:
        self._push(value)


class TupleStructRenderer(_TupleRenderer, SerializeTupleStruct[None]):
    """Renders ``Name(a, b)``."""

    def serialize_field(self, value: object) -> None:
        self._push(value)


class TupleVariantRenderer(_TupleRenderer, SerializeTupleVariant[None]):
    """Renders ``Variant(a, b)``."""

    def serialize_field(self, value: object) -> None:
        self._push(value)


class _StructRenderer(_CompoundRenderer):
    def __init__(self, builder: DebugStruct, element: ElementFactory) -> None:
        super().__init__(builder, element)
        self._struct = builder

    def serialize_field(self, key: str, value: object) -> None:
        self._ensure_open()
        with sink_errors():
            self._struct.field(key, self._element(value))


class StructRenderer(_StructRenderer, SerializeStruct[None]):
    """Renders ``Name { a: 1, b: 2 }``."""


class StructVariantRenderer(_StructRenderer, SerializeStructVariant[None]):
    """Renders ``Variant { a: 1, b: 2 }``."""
