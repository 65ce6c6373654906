# topmark:header:start
#
#   project      : SerDebug
#   file         : __init__.py
#   file_relpath : src/serdebug/fmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Debug-text output sink: writers, formatter, framing builders and scalar text.

Public modules:
    - serdebug.fmt.writers
    - serdebug.fmt.formatter
    - serdebug.fmt.builders
    - serdebug.fmt.scalars
"""

from __future__ import annotations

from serdebug.fmt.builders import DebugList, DebugMap, DebugStruct, DebugTuple
from serdebug.fmt.formatter import Debug, Formatter, PadAdapter, Raw, format_debug
from serdebug.fmt.writers import BoundedWriter, StreamWriter, StringWriter, Write

__all__ = [
    "BoundedWriter",
    "Debug",
    "DebugList",
    "DebugMap",
    "DebugStruct",
    "DebugTuple",
    "Formatter",
    "PadAdapter",
    "Raw",
    "StreamWriter",
    "StringWriter",
    "Write",
    "format_debug",
]
