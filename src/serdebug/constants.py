# topmark:header:start
#
#   project      : SerDebug
#   file         : constants.py
#   file_relpath : src/serdebug/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SerDebug Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

SERDEBUG_VERSION: str = get_version("serdebug")

# Indentation added per nesting level in alternate (pretty) mode.
INDENT: Final[str] = "    "

NONE_TOKEN: Final[str] = "None"
UNIT_TOKEN: Final[str] = "()"
TRUE_TOKEN: Final[str] = "true"
FALSE_TOKEN: Final[str] = "false"

# Name of the single-field tuple a present optional value renders as.
SOME_NAME: Final[str] = "Some"
