# topmark:header:start
#
#   project      : SerDebug
#   file         : __init__.py
#   file_relpath : src/serdebug/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for SerDebug.

SerDebug reads no configuration files. The only environment knob is
``SERDEBUG_LOG_LEVEL``, handled by [`serdebug.config.logging`][].
"""

from __future__ import annotations
