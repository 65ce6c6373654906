# topmark:header:start
#
#   project      : SerDebug
#   file         : visitor.py
#   file_relpath : src/serdebug/adapter/visitor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer that renders serialization events as debug text.

[`DebugSerializer`][serdebug.adapter.visitor.DebugSerializer] receives the one
top-level event of a value and routes it:

| event                                   | rendered as                        |
|-----------------------------------------|------------------------------------|
| scalars                                 | [`serdebug.fmt.scalars`][]         |
| ``serialize_none``                      | ``None``                           |
| ``serialize_some(v)``                   | ``Some(v)``                        |
| ``serialize_unit``                      | ``()``                             |
| unit struct / unit variant              | ``Name`` / ``Variant``             |
| newtype struct / newtype variant        | ``Name(v)`` / ``Variant(v)``       |
| seq                                     | ``[a, b]``                         |
| tuple                                   | ``(a, b)``                         |
| tuple struct / tuple variant            | ``Name(a, b)`` / ``Variant(a, b)`` |
| map                                     | ``{k: v}``                         |
| struct / struct variant                 | ``Name { a: 1 }``                  |

Enum variants render like standalone types named after the variant: the enum
name and the variant index never appear.

Children of compound events are wrapped in
[`SerializeDebug`][serdebug.adapter.visitor.SerializeDebug] and rendered by a
new serializer on the nested formatter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from serdebug.adapter.compound import (
    SeqRenderer,
    StructRenderer,
    StructVariantRenderer,
    TupleRenderer,
    TupleStructRenderer,
    TupleVariantRenderer,
)
from serdebug.adapter.map_state import MapRenderer
from serdebug.config.logging import get_logger
from serdebug.constants import SOME_NAME
from serdebug.errors import Error, render_errors, sink_errors
from serdebug.fmt import scalars
from serdebug.fmt.formatter import format_debug
from serdebug.ser.derive import serialize_value
from serdebug.ser.protocol import Serializer

if TYPE_CHECKING:
    from serdebug.config.logging import SerdebugLogger
    from serdebug.fmt.formatter import Formatter
    from serdebug.ser.protocol import OkT

logger: SerdebugLogger = get_logger(__name__)

T = TypeVar("T")


class DebugSerializer(Serializer[None]):
    """Single-use serializer writing one value into a formatter.

    Args:
        fmt (Formatter): Target formatter, borrowed for the duration of one event.
    """

    def __init__(self, fmt: Formatter) -> None:
        self._fmt: Formatter | None = fmt

    def _take(self, event: str) -> Formatter:
        fmt = self._fmt
        if fmt is None:
            logger.debug("serializer reused for %s after dispatching", event)
            raise Error()
        self._fmt = None
        logger.trace("dispatch %s", event)
        return fmt

    # --- Scalars ---

    def serialize_bool(self, v: bool) -> None:
        fmt = self._take("bool")
        with sink_errors():
            scalars.fmt_bool(fmt, v)

    def _int(self, kind: str, v: int) -> None:
        fmt = self._take(kind)
        with sink_errors():
            scalars.fmt_int(fmt, v)

    def serialize_i8(self, v: int) -> None:
        self._int("i8", v)

    def serialize_i16(self, v: int) -> None:
        self._int("i16", v)

    def serialize_i32(self, v: int) -> None:
        self._int("i32", v)

    def serialize_i64(self, v: int) -> None:
        self._int("i64", v)

    def serialize_i128(self, v: int) -> None:
        self._int("i128", v)

    def serialize_u8(self, v: int) -> None:
        self._int("u8", v)

    def serialize_u16(self, v: int) -> None:
        self._int("u16", v)

    def serialize_u32(self, v: int) -> None:
        self._int("u32", v)

    def serialize_u64(self, v: int) -> None:
        self._int("u64", v)

    def serialize_u128(self, v: int) -> None:
        self._int("u128", v)

    def serialize_f32(self, v: float) -> None:
        fmt = self._take("f32")
        with sink_errors():
            scalars.fmt_f32(fmt, v)

    def serialize_f64(self, v: float) -> None:
        fmt = self._take("f64")
        with sink_errors():
            scalars.fmt_float(fmt, v)

    def serialize_char(self, v: str) -> None:
        fmt = self._take("char")
        if len(v) != 1:
            raise Error.custom(f"expected a single character, got {v!r}")
        with sink_errors():
            scalars.fmt_char(fmt, v)

    def serialize_str(self, v: str) -> None:
        fmt = self._take("str")
        with sink_errors():
            scalars.fmt_str(fmt, v)

    def serialize_bytes(self, v: bytes) -> None:
        fmt = self._take("bytes")
        with sink_errors():
            scalars.fmt_bytes(fmt, v)

    def collect_str(self, v: object) -> None:
        fmt = self._take("collect_str")
        with sink_errors():
            scalars.fmt_display(fmt, v)

    def serialize_none(self) -> None:
        fmt = self._take("none")
        with sink_errors():
            scalars.fmt_none(fmt)

    def serialize_unit(self) -> None:
        fmt = self._take("unit")
        with sink_errors():
            scalars.fmt_unit(fmt)

    # --- Shapes rendered as named tuples ---

    def serialize_some(self, value: object) -> None:
        self.serialize_newtype_struct(SOME_NAME, value)

    def serialize_unit_struct(self, name: str) -> None:
        self.serialize_tuple_struct(name, 0).end()

    def serialize_unit_variant(self, name: str, variant_index: int, variant: str) -> None:
        self.serialize_tuple_struct(variant, 0).end()

    def serialize_newtype_struct(self, name: str, value: object) -> None:
        tup = self.serialize_tuple_struct(name, 1)
        tup.serialize_field(value)
        tup.end()

    def serialize_newtype_variant(
        self, name: str, variant_index: int, variant: str, value: object
    ) -> None:
        tup = self.serialize_tuple_struct(variant, 1)
        tup.serialize_field(value)
        tup.end()

    # --- Compounds ---

    def serialize_seq(self, length: int | None) -> SeqRenderer:
        fmt = self._take("seq")
        with sink_errors():
            return SeqRenderer(fmt.debug_list(), SerializeDebug)

    def serialize_tuple(self, length: int) -> TupleRenderer:
        fmt = self._take("tuple")
        with sink_errors():
            return TupleRenderer(fmt.debug_tuple(""), SerializeDebug)

    def serialize_tuple_struct(self, name: str, length: int) -> TupleStructRenderer:
        fmt = self._take("tuple_struct")
        with sink_errors():
            return TupleStructRenderer(fmt.debug_tuple(name), SerializeDebug)

    def serialize_tuple_variant(
        self, name: str, variant_index: int, variant: str, length: int
    ) -> TupleVariantRenderer:
        fmt = self._take("tuple_variant")
        with sink_errors():
            return TupleVariantRenderer(fmt.debug_tuple(variant), SerializeDebug)

    def serialize_map(self, length: int | None) -> MapRenderer:
        fmt = self._take("map")
        with sink_errors():
            return MapRenderer(fmt.debug_map(), SerializeDebug, alternate=fmt.alternate)

    def serialize_struct(self, name: str, length: int) -> StructRenderer:
        fmt = self._take("struct")
        with sink_errors():
            return StructRenderer(fmt.debug_struct(name), SerializeDebug)

    def serialize_struct_variant(
        self, name: str, variant_index: int, variant: str, length: int
    ) -> StructVariantRenderer:
        fmt = self._take("struct_variant")
        with sink_errors():
            return StructVariantRenderer(fmt.debug_struct(variant), SerializeDebug)

    def custom(self, msg: object) -> Error:
        return Error.custom(msg)


def to_formatter(value: object, fmt: Formatter) -> None:
    """Render ``value`` as debug text into ``fmt``.

    Args:
        value (object): Any serializable value.
        fmt (Formatter): Destination formatter; its ``alternate`` flag selects
            pretty-printed output.

    Raises:
        FormatError: If the sink failed or the value emitted an invalid event sequence.
    """
    with render_errors():
        serialize_value(value, DebugSerializer(fmt))


@dataclass(frozen=True, repr=False)
class SerializeDebug(Generic[T]):
    """Debug-formattable view of a serializable value.

    ``repr()`` and ``str()`` give the compact text; ``format()`` accepts ``""``
    or ``"?"`` for compact and ``"#"`` or ``"#?"`` for pretty-printed text:

    ```python
    f"{to_debug(value):#}"
    ```
    """

    value: T

    def fmt_debug(self, f: Formatter) -> None:
        to_formatter(self.value, f)

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        return serialize_value(self.value, serializer)

    def __repr__(self) -> str:
        return format_debug(self)

    def __str__(self) -> str:
        return format_debug(self)

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "?"):
            return format_debug(self)
        if format_spec in ("#", "#?"):
            return format_debug(self, alternate=True)
        raise ValueError(
            f"Unsupported format spec {format_spec!r} for {type(self).__name__}; "
            "expected '', '?', '#' or '#?'"
        )
