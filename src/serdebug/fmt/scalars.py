# topmark:header:start
#
#   project      : SerDebug
#   file         : scalars.py
#   file_relpath : src/serdebug/fmt/scalars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Debug text for primitive values.

Each ``fmt_*`` function writes the canonical debug text of one primitive into a
[`Formatter`][serdebug.fmt.formatter.Formatter]:

| value          | text                         |
|----------------|------------------------------|
| booleans       | ``true`` / ``false``         |
| integers       | ``-42``                      |
| floats         | ``1.0``, ``1e20``, ``NaN``   |
| 32-bit floats  | ``0.1`` (single precision)   |
| characters     | ``'a'``, ``'\\''``           |
| strings        | ``"a \\"quoted\\" string"``  |
| bytes          | ``[1, 2, 3]``                |
| absent value   | ``None``                     |
| unit           | ``()``                       |
"""

from __future__ import annotations

import math
import struct
import unicodedata
from typing import TYPE_CHECKING, Final

from serdebug.constants import FALSE_TOKEN, NONE_TOKEN, TRUE_TOKEN, UNIT_TOKEN
from serdebug.fmt.formatter import Raw

if TYPE_CHECKING:
    from serdebug.fmt.formatter import Formatter

_ESCAPES: Final[dict[str, str]] = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
}

# Grapheme-extending code points (combining and enclosing marks) are escaped.
_GRAPHEME_EXTEND_CATEGORIES: Final[frozenset[str]] = frozenset({"Mn", "Me"})


def _escape(text: str, quote: str) -> str:
    out: list[str] = []
    for ch in text:
        escaped = _ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif ch == quote:
            out.append("\\" + ch)
        elif ch.isprintable() and unicodedata.category(ch) not in _GRAPHEME_EXTEND_CATEGORIES:
            out.append(ch)
        else:
            out.append(f"\\u{{{ord(ch):x}}}")
    return "".join(out)


def escape_str(text: str) -> str:
    """Escape ``text`` for use between double quotes."""
    return _escape(text, '"')


def escape_char(ch: str) -> str:
    """Escape ``ch`` for use between single quotes."""
    return _escape(ch, "'")


def _shortest_single(value: float) -> float:
    """Return the double closest to the shortest decimal naming ``value`` as a 32-bit float.

    ``value`` is first narrowed to single precision; finite values beyond its
    range become infinities.
    """
    try:
        bits = struct.pack("<f", value)
    except OverflowError:
        return math.copysign(math.inf, value)
    narrowed: float = struct.unpack("<f", bits)[0]
    if math.isinf(narrowed):
        return narrowed
    for precision in range(1, 10):
        candidate = float(f"{narrowed:.{precision}g}")
        if struct.pack("<f", candidate) == bits:
            return candidate
    return narrowed


def float_text(value: float, *, single: bool = False) -> str:
    """Return the shortest round-trip text of ``value``.

    Integral values keep their ``.0``; exponents carry neither a ``+`` sign nor
    leading zeros.

    Args:
        value (float): The value to render.
        single (bool): Render the shortest text that round-trips through a
            32-bit float instead of a 64-bit one.

    Returns:
        str: The float text.
    """
    if math.isnan(value):
        return "NaN"
    if single:
        value = _shortest_single(value)
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    mantissa, sep, exponent = text.partition("e")
    if not sep:
        return text
    sign = "-" if exponent.startswith("-") else ""
    digits = exponent.lstrip("+-").lstrip("0") or "0"
    return f"{mantissa}e{sign}{digits}"


def fmt_bool(f: Formatter, value: bool) -> None:
    f.write_str(TRUE_TOKEN if value else FALSE_TOKEN)


def fmt_int(f: Formatter, value: int) -> None:
    f.write_str(str(int(value)))


def fmt_float(f: Formatter, value: float) -> None:
    f.write_str(float_text(value))


def fmt_f32(f: Formatter, value: float) -> None:
    """Write ``value`` as a 32-bit float."""
    f.write_str(float_text(value, single=True))


def fmt_char(f: Formatter, value: str) -> None:
    """Write a quoted character.

    Raises:
        ValueError: If ``value`` is not exactly one code point.
    """
    if len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")
    f.write_str(f"'{escape_char(value)}'")


def fmt_str(f: Formatter, value: str) -> None:
    f.write_str(f'"{escape_str(value)}"')


def fmt_bytes(f: Formatter, value: bytes) -> None:
    f.debug_list().entries(Raw(str(b)) for b in value).finish()


def fmt_display(f: Formatter, value: object) -> None:
    """Write ``str(value)`` verbatim, without quoting."""
    f.write_str(str(value))


def fmt_none(f: Formatter) -> None:
    f.write_str(NONE_TOKEN)


def fmt_unit(f: Formatter) -> None:
    f.write_str(UNIT_TOKEN)
