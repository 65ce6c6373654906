# topmark:header:start
#
#   project      : SerDebug
#   file         : samples.py
#   file_relpath : tests/samples.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sample types implementing both `serialize` and a hand-written `fmt_debug`.

The hand-written ``fmt_debug`` methods are the "native" debug rendering the
serializer-driven rendering is compared against.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from serdebug.api import ToDebug
from serdebug.fmt import scalars
from serdebug.fmt.formatter import Raw
from serdebug.ser.derive import I8, I16, I32, I64, U8, U16, U32, U64, Char

if TYPE_CHECKING:
    from serdebug.fmt.formatter import Debug, Formatter
    from serdebug.ser.protocol import OkT, Serializer


class NativeStr:
    """Native debug rendering of a string."""

    def __init__(self, value: str) -> None:
        self.value = value

    def fmt_debug(self, f: Formatter) -> None:
        scalars.fmt_str(f, self.value)


class NativeChar:
    """Native debug rendering of a character."""

    def __init__(self, value: str) -> None:
        self.value = value

    def fmt_debug(self, f: Formatter) -> None:
        scalars.fmt_char(f, self.value)


class NativeBytes:
    """Native debug rendering of a byte slice."""

    def __init__(self, value: bytes) -> None:
        self.value = value

    def fmt_debug(self, f: Formatter) -> None:
        f.debug_list().entries(Raw(str(b)) for b in self.value).finish()


def native_int(value: int) -> Debug:
    return Raw(str(value))


UNIT: Debug = Raw("()")


@dataclass
class Emit:
    """Value whose serialization is an arbitrary callback (one event sequence)."""

    emit: Callable[[Serializer[Any]], Any]

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        return self.emit(serializer)


@dataclass
class Signed(ToDebug):
    a: int
    b: int
    c: int
    d: int

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        state = serializer.serialize_struct("Signed", 4)
        state.serialize_field("a", I8(self.a))
        state.serialize_field("b", I16(self.b))
        state.serialize_field("c", I32(self.c))
        state.serialize_field("d", I64(self.d))
        return state.end()

    def fmt_debug(self, f: Formatter) -> None:
        s = f.debug_struct("Signed")
        s.field("a", native_int(self.a)).field("b", native_int(self.b))
        s.field("c", native_int(self.c)).field("d", native_int(self.d))
        s.finish()


@dataclass
class Unsigned(ToDebug):
    a: int
    b: int
    c: int
    d: int

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        state = serializer.serialize_struct("Unsigned", 4)
        state.serialize_field("a", U8(self.a))
        state.serialize_field("b", U16(self.b))
        state.serialize_field("c", U32(self.c))
        state.serialize_field("d", U64(self.d))
        return state.end()

    def fmt_debug(self, f: Formatter) -> None:
        s = f.debug_struct("Unsigned")
        s.field("a", native_int(self.a)).field("b", native_int(self.b))
        s.field("c", native_int(self.c)).field("d", native_int(self.d))
        s.finish()


@dataclass
class Mixed(ToDebug):
    """Struct mixing nested structs, a char, a string, bytes and a unit field."""

    a: Signed
    b: Unsigned
    c: str
    d: str
    e: bytes

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        state = serializer.serialize_struct("Struct", 6)
        state.serialize_field("a", self.a)
        state.serialize_field("b", self.b)
        state.serialize_field("c", Char(self.c))
        state.serialize_field("d", self.d)
        state.serialize_field("e", self.e)
        state.serialize_field("f", ())
        return state.end()

    def fmt_debug(self, f: Formatter) -> None:
        s = f.debug_struct("Struct")
        s.field("a", self.a).field("b", self.b)
        s.field("c", NativeChar(self.c)).field("d", NativeStr(self.d))
        s.field("e", NativeBytes(self.e)).field("f", UNIT)
        s.finish()


MIXED = Mixed(
    a=Signed(a=-1, b=42, c=-42, d=42),
    b=Unsigned(a=1, b=42, c=1, d=42),
    c="a",
    d="a string",
    e=bytes([1, 2, 3]),
)


class Option(ToDebug):
    """Optional ``int``: absent when ``value`` is None."""

    def __init__(self, value: int | None) -> None:
        self.value = value

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        if self.value is None:
            return serializer.serialize_none()
        return serializer.serialize_some(self.value)

    def fmt_debug(self, f: Formatter) -> None:
        if self.value is None:
            f.write_str("None")
        else:
            f.debug_tuple("Some").field(native_int(self.value)).finish()


class Outcome(ToDebug):
    """Two-variant success/failure type with an ``int`` payload."""

    def __init__(self, ok: bool, value: int) -> None:
        self.ok = ok
        self.value = value

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        if self.ok:
            return serializer.serialize_newtype_variant("Result", 0, "Ok", self.value)
        return serializer.serialize_newtype_variant("Result", 1, "Err", self.value)

    def fmt_debug(self, f: Formatter) -> None:
        f.debug_tuple("Ok" if self.ok else "Err").field(native_int(self.value)).finish()


class Tagged(ToDebug):
    """Tagged union with unit, newtype, tuple and struct variants."""

    def __init__(self, variant: str, *payload: int) -> None:
        self.variant = variant
        self.payload = payload

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        if self.variant == "Unit":
            return serializer.serialize_unit_variant("Tagged", 0, "Unit")
        if self.variant == "NewType":
            return serializer.serialize_newtype_variant("Tagged", 1, "NewType", self.payload[0])
        if self.variant == "Tuple":
            tv = serializer.serialize_tuple_variant("Tagged", 2, "Tuple", len(self.payload))
            for item in self.payload:
                tv.serialize_field(item)
            return tv.end()
        sv = serializer.serialize_struct_variant("Tagged", 3, "Struct", 2)
        sv.serialize_field("a", self.payload[0])
        sv.serialize_field("b", self.payload[1])
        return sv.end()

    def fmt_debug(self, f: Formatter) -> None:
        if self.variant == "Struct":
            s = f.debug_struct("Struct")
            s.field("a", native_int(self.payload[0])).field("b", native_int(self.payload[1]))
            s.finish()
            return
        t = f.debug_tuple(self.variant)
        for item in self.payload:
            t.field(native_int(item))
        t.finish()


class Pair(ToDebug):
    """Anonymous two-element tuple of ints."""

    def __init__(self, a: int, b: int) -> None:
        self.a = a
        self.b = b

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        tup = serializer.serialize_tuple(2)
        tup.serialize_element(self.a)
        tup.serialize_element(self.b)
        return tup.end()

    def fmt_debug(self, f: Formatter) -> None:
        f.debug_tuple("").field(native_int(self.a)).field(native_int(self.b)).finish()
