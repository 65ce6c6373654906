# topmark:header:start
#
#   project      : SerDebug
#   file         : logging.py
#   file_relpath : src/serdebug/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SerDebug logging with a TRACE level below DEBUG.

The renderer is a library, so importing it only registers the TRACE level and
the logger class. Applications (and the test suite) call
[`setup_logging`][serdebug.config.logging.setup_logging] to get colored output.

Levels used by the package:
    - TRACE: one record per serialization event dispatched.
    - DEBUG: error conversions and pending map keys dropped on close.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "SERDEBUG_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"


class SerdebugLogger(logging.Logger):
    """Logger with a ``trace()`` method for per-event records."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra information for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(SerdebugLogger)


# Lowest level first; a record takes the style of the last threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by its severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        style: Callable[[str], str] = chalk.dim
        for threshold, candidate in _LEVEL_STYLES:
            if record.levelno < threshold:
                break
            style = candidate
        return style(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``SERDEBUG_LOG_LEVEL``, or None.

    The value may be a registered level name in any case (``trace``,
    ``WARN``...) or a plain number. Unset, empty and unknown values give None.
    """
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None, stream: TextIO | None = None) -> None:
    """Send colored records at ``level`` and above to ``stream``.

    Handlers installed by earlier calls are replaced.

    Args:
        level (int | None): Root level; falls back to the environment, then
            to CRITICAL.
        stream (TextIO | None): Destination; standard output when None.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for old in root_logger.handlers[:]:
        if isinstance(old.formatter, ChalkFormatter):
            root_logger.removeHandler(old)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> SerdebugLogger:
    """Return the package logger called ``name``."""
    return cast("SerdebugLogger", logging.getLogger(name))
