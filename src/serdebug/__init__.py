# topmark:header:start
#
#   project      : SerDebug
#   file         : __init__.py
#   file_relpath : src/serdebug/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SerDebug package.

SerDebug renders any value that describes itself through a serialization event
protocol as nested, human-readable debug text (``Name { field: value }``,
``[a, b]``, ``{k: v}``, ...), compact or pretty-printed.
"""

from __future__ import annotations

from serdebug.api import ToDebug, to_debug, to_formatter, to_string, to_writer
from serdebug.adapter.visitor import SerializeDebug
from serdebug.constants import SERDEBUG_VERSION
from serdebug.errors import Error, FormatError
from serdebug.fmt.formatter import Formatter

__version__ = SERDEBUG_VERSION

__all__ = [
    "Error",
    "FormatError",
    "Formatter",
    "SerializeDebug",
    "ToDebug",
    "to_debug",
    "to_formatter",
    "to_string",
    "to_writer",
]
