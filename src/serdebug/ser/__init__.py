# topmark:header:start
#
#   project      : SerDebug
#   file         : __init__.py
#   file_relpath : src/serdebug/ser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialization event protocol and the mapping of plain Python values onto it."""

from __future__ import annotations

from serdebug.ser.derive import (
    F32,
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    Char,
    Display,
    Some,
    serialize_value,
)
from serdebug.ser.protocol import (
    Serialize,
    SerializeCompound,
    SerializeMap,
    SerializeSeq,
    SerializeStruct,
    SerializeStructVariant,
    SerializeTuple,
    SerializeTupleStruct,
    SerializeTupleVariant,
    Serializer,
)

__all__ = [
    "F32",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "Char",
    "Display",
    "Serialize",
    "SerializeCompound",
    "SerializeMap",
    "SerializeSeq",
    "SerializeStruct",
    "SerializeStructVariant",
    "SerializeTuple",
    "SerializeTupleStruct",
    "SerializeTupleVariant",
    "Serializer",
    "Some",
    "serialize_value",
]
