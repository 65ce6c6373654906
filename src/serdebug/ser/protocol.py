# topmark:header:start
#
#   project      : SerDebug
#   file         : protocol.py
#   file_relpath : src/serdebug/ser/protocol.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialization event protocol.

A serializable value announces its shape by calling exactly one event method
on a [`Serializer`][serdebug.ser.protocol.Serializer]. Scalar events complete
immediately. Compound events (``serialize_seq``, ``serialize_struct``, ...)
return a builder that the value feeds with its children and then closes with
``end()``:

```python
class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x, self.y = x, y

    def serialize(self, serializer):
        state = serializer.serialize_struct("Point", 2)
        state.serialize_field("x", self.x)
        state.serialize_field("y", self.y)
        return state.end()
```

Builders are also context managers: leaving the ``with`` block normally calls
``end()`` unless it was already called; leaving it through an exception closes
the builder without writing anything further.

Children are plain objects. How a child maps onto events is decided by
[`serdebug.ser.derive.serialize_value`][].
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

OkT = TypeVar("OkT")
OkT_co = TypeVar("OkT_co", covariant=True)
_C = TypeVar("_C", bound="SerializeCompound[object]")


@runtime_checkable
class Serialize(Protocol):
    """A value that can describe itself to a serializer."""

    def serialize(self, serializer: Serializer[OkT]) -> OkT:
        """Emit exactly one top-level event on ``serializer``."""
        ...


class SerializeCompound(ABC, Generic[OkT_co]):
    """Common lifecycle of the compound builders."""

    @property
    @abstractmethod
    def closed(self) -> bool:
        """Whether ``end()`` or ``abandon()`` was already called."""

    @abstractmethod
    def end(self) -> OkT_co:
        """Close the compound and write its closing framing."""

    @abstractmethod
    def abandon(self) -> None:
        """Close the compound without writing anything further."""

    def __enter__(self: _C) -> _C:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.closed:
            return
        if exc_type is None:
            self.end()
        else:
            self.abandon()


class SerializeSeq(SerializeCompound[OkT_co]):
    """Builder returned by `Serializer.serialize_seq`."""

    @abstractmethod
    def serialize_element(self, value: object) -> None: ...


class SerializeTuple(SerializeCompound[OkT_co]):
    """Builder returned by `Serializer.serialize_tuple`."""

    @abstractmethod
    def serialize_element(self, value: object) -> None: ...


class SerializeTupleStruct(SerializeCompound[OkT_co]):
    """Builder returned by `Serializer.serialize_tuple_struct`."""

    @abstractmethod
    def serialize_field(self, value: object) -> None: ...


class SerializeTupleVariant(SerializeCompound[OkT_co]):
    """Builder returned by `Serializer.serialize_tuple_variant`."""

    @abstractmethod
    def serialize_field(self, value: object) -> None: ...


class SerializeStruct(SerializeCompound[OkT_co]):
    """Builder returned by `Serializer.serialize_struct`."""

    @abstractmethod
    def serialize_field(self, key: str, value: object) -> None: ...

    def skip_field(self, key: str) -> None:
        """Mark field ``key`` as intentionally omitted. Default: no-op."""


class SerializeStructVariant(SerializeCompound[OkT_co]):
    """Builder returned by `Serializer.serialize_struct_variant`."""

    @abstractmethod
    def serialize_field(self, key: str, value: object) -> None: ...

    def skip_field(self, key: str) -> None:
        """Mark field ``key`` as intentionally omitted. Default: no-op."""


class SerializeMap(SerializeCompound[OkT_co]):
    """Builder returned by `Serializer.serialize_map`.

    Entries are submitted either with `serialize_entry` or as a
    `serialize_key` call followed by a `serialize_value` call.
    """

    @abstractmethod
    def serialize_key(self, key: object) -> None: ...

    @abstractmethod
    def serialize_value(self, value: object) -> None: ...

    def serialize_entry(self, key: object, value: object) -> None:
        """Submit a key and its value together."""
        self.serialize_key(key)
        self.serialize_value(value)


class Serializer(ABC, Generic[OkT]):
    """Receiver of the serialization events of one value.

    ``name`` arguments are type names, ``variant`` arguments are the names of
    enum members and ``variant_index`` their position in the enum. Length
    arguments are hints and may be ``None`` where the protocol allows it.
    """

    @abstractmethod
    def serialize_bool(self, v: bool) -> OkT: ...

    @abstractmethod
    def serialize_i8(self, v: int) -> OkT: ...

    @abstractmethod
    def serialize_i16(self, v: int) -> OkT: ...

    @abstractmethod
    def serialize_i32(self, v: int) -> OkT: ...

    @abstractmethod
    def serialize_i64(self, v: int) -> OkT: ...

    @abstractmethod
    def serialize_i128(self, v: int) -> OkT: ...

    @abstractmethod
    def serialize_u8(self, v: int) -> OkT: ...

    @abstractmethod
    def serialize_u16(self, v: int) -> OkT: ...

    @abstractmethod
    def serialize_u32(self, v: int) -> OkT: ...

    @abstractmethod
    def serialize_u64(self, v: int) -> OkT: ...

    @abstractmethod
    def serialize_u128(self, v: int) -> OkT: ...

    @abstractmethod
    def serialize_f32(self, v: float) -> OkT: ...

    @abstractmethod
    def serialize_f64(self, v: float) -> OkT: ...

    @abstractmethod
    def serialize_char(self, v: str) -> OkT: ...

    @abstractmethod
    def serialize_str(self, v: str) -> OkT: ...

    @abstractmethod
    def serialize_bytes(self, v: bytes) -> OkT: ...

    @abstractmethod
    def collect_str(self, v: object) -> OkT:
        """Serialize the ``str()`` text of ``v``."""

    @abstractmethod
    def serialize_none(self) -> OkT: ...

    @abstractmethod
    def serialize_some(self, value: object) -> OkT: ...

    @abstractmethod
    def serialize_unit(self) -> OkT: ...

    @abstractmethod
    def serialize_unit_struct(self, name: str) -> OkT: ...

    @abstractmethod
    def serialize_unit_variant(self, name: str, variant_index: int, variant: str) -> OkT: ...

    @abstractmethod
    def serialize_newtype_struct(self, name: str, value: object) -> OkT: ...

    @abstractmethod
    def serialize_newtype_variant(
        self, name: str, variant_index: int, variant: str, value: object
    ) -> OkT: ...

    @abstractmethod
    def serialize_seq(self, length: int | None) -> SerializeSeq[OkT]: ...

    @abstractmethod
    def serialize_tuple(self, length: int) -> SerializeTuple[OkT]: ...

    @abstractmethod
    def serialize_tuple_struct(self, name: str, length: int) -> SerializeTupleStruct[OkT]: ...

    @abstractmethod
    def serialize_tuple_variant(
        self, name: str, variant_index: int, variant: str, length: int
    ) -> SerializeTupleVariant[OkT]: ...

    @abstractmethod
    def serialize_map(self, length: int | None) -> SerializeMap[OkT]: ...

    @abstractmethod
    def serialize_struct(self, name: str, length: int) -> SerializeStruct[OkT]: ...

    @abstractmethod
    def serialize_struct_variant(
        self, name: str, variant_index: int, variant: str, length: int
    ) -> SerializeStructVariant[OkT]: ...

    @abstractmethod
    def custom(self, msg: object) -> Exception:
        """Build the error to raise for an application-level failure.

        Args:
            msg (object): Description of the failure.

        Returns:
            Exception: The exception the caller should raise.
        """
