# topmark:header:start
#
#   project      : SerDebug
#   file         : test_derive.py
#   file_relpath : tests/ser/test_derive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mapping of plain Python values onto serialization events."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import NamedTuple

import pytest

from serdebug.api import to_string
from serdebug.errors import FormatError
from serdebug.ser.derive import (
    I8,
    I128,
    U8,
    U16,
    U128,
    Some,
)
from serdebug.ser.protocol import Serialize
from tests.conftest import parametrize


class Color(Enum):
    RED = "r"
    GREEN = "g"


class Level(IntEnum):
    LOW = 1
    HIGH = 2


@dataclass
class Point:
    x: int
    y: int


@dataclass
class Marker:
    pass


@dataclass
class Secret:
    user: str
    password: str = field(repr=False)


class Span(NamedTuple):
    start: int
    end: int


@dataclass
class Shape:
    color: Color
    points: list[Point]
    label: str | None = None


def test_enum_members_render_as_variant_names() -> None:
    """Enum members render as their bare member name, even int-valued ones."""
    assert to_string(Color.GREEN) == "GREEN"
    assert to_string(Level.HIGH) == "HIGH"


def test_dataclass_renders_as_struct() -> None:
    """Dataclass fields render in declaration order."""
    assert to_string(Point(1, 2)) == "Point { x: 1, y: 2 }"
    assert to_string(Marker()) == "Marker"


def test_dataclass_hides_repr_false_fields() -> None:
    """Fields excluded from ``repr()`` are excluded from debug text."""
    assert to_string(Secret("alice", "hunter2")) == 'Secret { user: "alice" }'


def test_nested_dataclass_pretty() -> None:
    """Dataclasses, enums, lists and optionals compose."""
    shape = Shape(Color.RED, [Point(0, 0)], label="origin")
    assert to_string(shape) == (
        'Shape { color: RED, points: [Point { x: 0, y: 0 }], label: "origin" }'
    )
    assert to_string(shape, alternate=True) == "\n".join(
        [
            "Shape {",
            "    color: RED,",
            "    points: [",
            "        Point {",
            "            x: 0,",
            "            y: 0,",
            "        },",
            "    ],",
            '    label: "origin",',
            "}",
        ]
    )


def test_namedtuple_renders_as_struct() -> None:
    """Named tuples keep their field names."""
    assert to_string(Span(1, 4)) == "Span { start: 1, end: 4 }"


def test_tuples() -> None:
    """The empty tuple is unit; other tuples are anonymous tuples."""
    assert to_string(()) == "()"
    assert to_string((1,)) == "(1,)"
    assert to_string((1, "a")) == '(1, "a")'


def test_mappings_keep_insertion_order() -> None:
    """Mappings render their entries in iteration order."""
    assert to_string({"b": 1, "a": 2}) == '{"b": 1, "a": 2}'
    assert to_string(OrderedDict([(2, None), (1, True)])) == "{2: None, 1: true}"


def test_sets_are_sorted_when_possible() -> None:
    """Sets render sorted; unorderable sets still render."""
    assert to_string({3, 1, 2}) == "[1, 2, 3]"
    assert to_string(frozenset({"b", "a"})) == '["a", "b"]'
    mixed = to_string({1, "a"})
    assert mixed in ('[1, "a"]', '["a", 1]')


def test_sequences_render_as_lists() -> None:
    """Lists and ranges are sequences."""
    assert to_string([1, [2, [3]]]) == "[1, [2, [3]]]"
    assert to_string(range(3)) == "[0, 1, 2]"


@parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (-(2**63), str(-(2**63))),
        (2**64 - 1, str(2**64 - 1)),
        (-(2**127), str(-(2**127))),
        (2**128 - 1, str(2**128 - 1)),
    ],
)
def test_integer_widths(value: int, expected: str) -> None:
    """Integers up to 128 bits render as plain decimal."""
    assert to_string(value) == expected


@parametrize(
    ("factory", "value"),
    [
        (I8, 128),
        (I8, -129),
        (U8, -1),
        (U8, 256),
        (U16, 2**16),
        (I128, 2**127),
        (U128, 2**128),
    ],
)
def test_integer_wrappers_check_range(factory: type[I8], value: int) -> None:
    """Explicit-width wrappers reject out-of-range values at construction."""
    with pytest.raises(ValueError):
        factory(value)


def test_integer_wrappers_render_their_value() -> None:
    """Explicit-width wrappers render the same decimal text."""
    assert to_string([I8(-128), U8(255), I128(-(2**127))]) == f"[-128, 255, {-(2**127)}]"


def test_some_wrapper() -> None:
    """`Some` marks a present optional value."""
    assert to_string(Some(None)) == "Some(None)"
    assert to_string(Some(Some(1))) == "Some(Some(1))"


def test_serialize_protocol_is_structural() -> None:
    """Any object with a ``serialize`` method takes part; classes themselves do not."""
    assert isinstance(Some(1), Serialize)
    assert not isinstance(Point(1, 2), Serialize)
    with pytest.raises(FormatError):
        to_string(Some)
