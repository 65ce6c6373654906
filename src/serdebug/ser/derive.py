# topmark:header:start
#
#   project      : SerDebug
#   file         : derive.py
#   file_relpath : src/serdebug/ser/derive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Map plain Python values onto serialization events.

[`serialize_value`][serdebug.ser.derive.serialize_value] lets any value take
part in the [`serdebug.ser.protocol`][] without implementing ``serialize``
itself:

| value                                 | event                       |
|---------------------------------------|-----------------------------|
| object with a ``serialize`` method    | whatever the method emits   |
| ``None``                              | ``serialize_none``          |
| ``bool``                              | ``serialize_bool``          |
| ``int``                               | i64 / u64 / i128 / u128     |
| ``float``                             | ``serialize_f64``           |
| ``str``                               | ``serialize_str``           |
| bytes-like                            | ``serialize_bytes``         |
| ``Enum`` member                       | ``serialize_unit_variant``  |
| dataclass instance                    | struct (unit struct if no fields) |
| ``()``                                | ``serialize_unit``          |
| named tuple                           | ``serialize_struct``        |
| ``tuple``                             | ``serialize_tuple``         |
| mapping                               | ``serialize_map``           |
| ``list`` and other sequences          | ``serialize_seq``           |
| ``set`` / ``frozenset``               | ``serialize_seq``, sorted when orderable |

Python has a single ``int`` and a single ``float`` type, so the width of a
scalar is chosen from its value. The wrappers in this module (`I8`, `U16`,
`F32`, `Char`, `Some`, `Display`, ...) select a specific event explicitly.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, ClassVar, cast

from serdebug.ser.protocol import Serialize

if TYPE_CHECKING:
    from serdebug.ser.protocol import OkT, Serializer

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1
I128_MIN = -(2**127)
I128_MAX = 2**127 - 1
U128_MAX = 2**128 - 1


def serialize_value(value: object, serializer: Serializer[OkT]) -> OkT:
    """Emit the events describing ``value`` on ``serializer``.

    Args:
        value (object): Any value; see the module docstring for the mapping.
        serializer (Serializer[OkT]): Receiver of the events.

    Returns:
        OkT: Whatever the serializer returns for the top-level event.

    Raises:
        Exception: ``serializer.custom(...)`` when ``value`` has no known shape.
    """
    if isinstance(value, Serialize) and not isinstance(value, type):
        return value.serialize(serializer)
    if value is None:
        return serializer.serialize_none()
    # Enum before int/str: IntEnum and StrEnum members are both
    if isinstance(value, Enum):
        return _serialize_enum(value, serializer)
    if isinstance(value, bool):
        return serializer.serialize_bool(value)
    if isinstance(value, int):
        return _serialize_int(value, serializer)
    if isinstance(value, float):
        return serializer.serialize_f64(value)
    if isinstance(value, str):
        return serializer.serialize_str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return serializer.serialize_bytes(bytes(value))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _serialize_dataclass(value, serializer)
    if isinstance(value, tuple):
        return _serialize_tuple(cast("tuple[object, ...]", value), serializer)
    if isinstance(value, Mapping):
        return _serialize_mapping(cast("Mapping[object, object]", value), serializer)
    if isinstance(value, (Set, Sequence)):
        return _serialize_seq(_iter_elements(value), serializer)
    raise serializer.custom(f"cannot serialize value of type {type(value).__qualname__}")


def _iter_elements(value: Set[Any] | Sequence[Any]) -> list[object]:
    if isinstance(value, Set):
        # Sets have no order of their own; sort for deterministic output.
        try:
            return sorted(value)
        except TypeError:
            return list(value)
    return list(value)


def _serialize_int(value: int, serializer: Serializer[OkT]) -> OkT:
    if I64_MIN <= value <= I64_MAX:
        return serializer.serialize_i64(value)
    if 0 <= value <= U64_MAX:
        return serializer.serialize_u64(value)
    if I128_MIN <= value <= I128_MAX:
        return serializer.serialize_i128(value)
    if 0 <= value <= U128_MAX:
        return serializer.serialize_u128(value)
    raise serializer.custom(f"integer {value} does not fit in 128 bits")


def _serialize_enum(value: Enum, serializer: Serializer[OkT]) -> OkT:
    enum_cls = type(value)
    index = list(enum_cls.__members__).index(value.name)
    return serializer.serialize_unit_variant(enum_cls.__name__, index, value.name)


def _serialize_dataclass(value: object, serializer: Serializer[OkT]) -> OkT:
    name = type(value).__name__
    fields = dataclasses.fields(value)  # pyright: ignore[reportArgumentType]
    if not fields:
        return serializer.serialize_unit_struct(name)
    state = serializer.serialize_struct(name, len(fields))
    for field in fields:
        # Fields hidden from repr() are hidden from debug text as well
        if field.repr:
            state.serialize_field(field.name, getattr(value, field.name))
        else:
            state.skip_field(field.name)
    return state.end()


def _serialize_tuple(value: tuple[object, ...], serializer: Serializer[OkT]) -> OkT:
    if not value:
        return serializer.serialize_unit()
    field_names: tuple[str, ...] | None = getattr(value, "_fields", None)
    if field_names is not None:
        struct = serializer.serialize_struct(type(value).__name__, len(field_names))
        for key, item in zip(field_names, value):
            struct.serialize_field(key, item)
        return struct.end()
    tup = serializer.serialize_tuple(len(value))
    for item in value:
        tup.serialize_element(item)
    return tup.end()


def _serialize_mapping(value: Mapping[object, object], serializer: Serializer[OkT]) -> OkT:
    state = serializer.serialize_map(len(value))
    for key, item in value.items():
        state.serialize_entry(key, item)
    return state.end()


def _serialize_seq(items: list[object], serializer: Serializer[OkT]) -> OkT:
    seq = serializer.serialize_seq(len(items))
    for item in items:
        seq.serialize_element(item)
    return seq.end()


# --- Explicit scalar wrappers ---


@dataclass(frozen=True)
class _Int:
    """Integer serialized with a fixed width."""

    value: int

    kind: ClassVar[str] = "i64"
    bits: ClassVar[int] = 64
    signed: ClassVar[bool] = True

    def __post_init__(self) -> None:
        if self.signed:
            low, high = -(2 ** (self.bits - 1)), 2 ** (self.bits - 1) - 1
        else:
            low, high = 0, 2**self.bits - 1
        if not low <= self.value <= high:
            raise ValueError(f"{self.value} is out of range for {self.kind}")

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        method = cast("Callable[[int], OkT]", getattr(serializer, f"serialize_{self.kind}"))
        return method(self.value)


class I8(_Int):
    kind, bits, signed = "i8", 8, True


class I16(_Int):
    kind, bits, signed = "i16", 16, True


class I32(_Int):
    kind, bits, signed = "i32", 32, True


class I64(_Int):
    kind, bits, signed = "i64", 64, True


class I128(_Int):
    kind, bits, signed = "i128", 128, True


class U8(_Int):
    kind, bits, signed = "u8", 8, False


class U16(_Int):
    kind, bits, signed = "u16", 16, False


class U32(_Int):
    kind, bits, signed = "u32", 32, False


class U64(_Int):
    kind, bits, signed = "u64", 64, False


class U128(_Int):
    kind, bits, signed = "u128", 128, False


@dataclass(frozen=True)
class F32:
    """Float serialized as a 32-bit float event."""

    value: float

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        return serializer.serialize_f32(self.value)


@dataclass(frozen=True)
class Char:
    """A single character, rendered with single quotes."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"expected a single character, got {self.value!r}")

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        return serializer.serialize_char(self.value)


@dataclass(frozen=True)
class Some:
    """A present optional value, as opposed to ``None``."""

    value: object

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        return serializer.serialize_some(self.value)


@dataclass(frozen=True)
class Display:
    """A value serialized through its ``str()`` text."""

    value: object

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        return serializer.collect_str(self.value)
