# topmark:header:start
#
#   project      : SerDebug
#   file         : __init__.py
#   file_relpath : src/serdebug/adapter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer rendering serialization events as debug text.

Public modules:
    - serdebug.adapter.visitor
    - serdebug.adapter.compound
    - serdebug.adapter.map_state
"""

from __future__ import annotations

from serdebug.adapter.map_state import KeyBuffer, MapRenderer, MapState
from serdebug.adapter.visitor import DebugSerializer, SerializeDebug, to_formatter

__all__ = [
    "DebugSerializer",
    "KeyBuffer",
    "MapRenderer",
    "MapState",
    "SerializeDebug",
    "to_formatter",
]
