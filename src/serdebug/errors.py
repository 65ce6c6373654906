# topmark:header:start
#
#   project      : SerDebug
#   file         : errors.py
#   file_relpath : src/serdebug/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error channel between the output sink and the debug renderer.

Two stateless exceptions flow through a render:

- [`FormatError`][serdebug.errors.FormatError] is raised by the output sink
  (writers, [`Formatter`][serdebug.fmt.formatter.Formatter] and its builders).
- [`Error`][serdebug.errors.Error] is raised by the renderer. Sink failures are
  converted into it by [`sink_errors`][serdebug.errors.sink_errors], and the
  public entry points convert it back into `FormatError` for the caller.

Neither exception carries a payload: a debug formatter has no side channel for
error messages, so callers only ever learn *that* rendering failed.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Final

from serdebug.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from serdebug.config.logging import SerdebugLogger

logger: SerdebugLogger = get_logger(__name__)

ERROR_TEXT: Final[str] = "serdebug error"


class FormatError(Exception):
    """The output sink failed to accept text."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "an error occurred when formatting an argument"


class Error(Exception):
    """Rendering failed.

    Raised when the sink fails or when the serialization events arrive in an
    order the renderer cannot accept (a map value without a key, two keys in a
    row, reuse of a closed builder or a consumed serializer).
    """

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return ERROR_TEXT

    @classmethod
    def custom(cls, msg: object) -> Error:
        """Build an error reported by the value being serialized.

        The message is dropped; it only reaches the log at TRACE level.

        Args:
            msg (object): Application-level description of the problem.

        Returns:
            Error: A new stateless error.
        """
        logger.trace("discarding custom serialization error: %s", msg)
        return cls()


@contextmanager
def sink_errors() -> Iterator[None]:
    """Convert sink failures raised inside the block into `Error`.

    Raises:
        Error: If the block raised `FormatError`.
    """
    try:
        yield
    except FormatError as exc:
        logger.debug("sink failure converted to render error")
        raise Error() from exc


@contextmanager
def render_errors() -> Iterator[None]:
    """Convert render failures raised inside the block into `FormatError`.

    Raises:
        FormatError: If the block raised `Error`.
    """
    try:
        yield
    except Error as exc:
        raise FormatError() from exc
