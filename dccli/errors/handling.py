from __future__ import annotations

import traceback

from ..logging_config import log_structured_error
from .internal import (
    InternalError,
    NetworkError,
    ParsingError,
)


def categorize_error(error: BaseException) -> str:
    """Map an exception to the category used in structured error logs."""
    if isinstance(error, NetworkError | OSError):
        return "network"
    if isinstance(error, ParsingError):
        return "parsing"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def format_error_chain(error: BaseException) -> str:
    """Render an exception and its causes as ``outer: cause: root``.

    Follows ``__cause__`` first and falls back to ``__context__`` for
    implicitly chained exceptions. Messages that repeat are collapsed.

    Args:
        error: The outermost exception.

    Returns:
        A single line describing what failed and why.
    """
    parts: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = str(current) or type(current).__name__
        if not parts or parts[-1] != text:
            parts.append(text)
        current = current.__cause__ or current.__context__
    return ": ".join(parts)


def format_traceback(error: BaseException) -> str:
    """Return the captured stack trace of ``error`` including chained causes."""
    return "".join(traceback.format_exception(error))


def log_error(message: str, error: BaseException, context: dict | None = None) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.

    Returns:
        None
    """
    data: dict[str, object] = {}
    if isinstance(error, InternalError):
        data.update(error.data)
    if context:
        data.update(context)
    log_structured_error(
        error_type=categorize_error(error),
        message=f"{message}: {format_error_chain(error)}",
        exception=error,
        context=data or None,
    )
