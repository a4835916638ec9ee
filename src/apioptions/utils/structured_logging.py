r"""Structured logging utilities for machine-readable log output.

Every OPTIONS invocation runs inside a correlation scope, so the records
it logs can be grouped together by log aggregation systems. The JSON
formatter is opt-in:

```python
import logging
from apioptions.utils.structured_logging import StructuredFormatter

handler = logging.StreamHandler()
handler.setFormatter(StructuredFormatter())
logger = logging.getLogger("apioptions")
logger.addHandler(handler)
logger.setLevel(logging.INFO)
```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "correlation_scope",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id", default=None
)

# Attributes every LogRecord has; anything else was passed through ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "msecs",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "sinfo",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "taskName",
    }
)


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Example:
        ```pycon
        >>> from apioptions.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ... )
        >>> clear_correlation_id()
        >>> get_correlation_id()

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID of the current context.

    Args:
        correlation_id: The correlation ID, e.g. an invocation ID.

    Example:
        ```pycon
        >>> from apioptions.utils.structured_logging import (
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("invocation-1")
        >>> get_correlation_id()
        'invocation-1'

        ```
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID of the current context."""
    _correlation_id.set(None)


@contextmanager
def correlation_scope(correlation_id: str) -> Generator[str, None, None]:
    """Set a correlation ID for the duration of a block.

    The previous value is restored on exit, so nested or sequential
    invocations sharing a context do not leak their IDs.

    Args:
        correlation_id: The correlation ID to use inside the block.

    Example:
        ```pycon
        >>> from apioptions.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     correlation_scope,
        ...     get_correlation_id,
        ... )
        >>> clear_correlation_id()
        >>> with correlation_scope("abc"):
        ...     get_correlation_id()
        ...
        'abc'
        >>> get_correlation_id()

        ```
    """
    token = _correlation_id.set(correlation_id)
    try:
        yield correlation_id
    finally:
        _correlation_id.reset(token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record becomes a JSON object with ``timestamp``, ``level``,
    ``logger``, ``message``, ``module``, ``function``, ``line``, the
    correlation ID when one is set, the exception text when present, and
    every field passed through ``extra``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from apioptions.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest.structured")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("OPTIONS sent", extra={"url": "https://x.org"})
        >>> json.loads(stream.getvalue())["url"]
        'https://x.org'

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002, N802
        """Format the record time as ISO 8601 with milliseconds (UTC)."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured fields.

    Args:
        logger: Logger to use.
        level: Log level (e.g. ``logging.INFO``).
        message: Log message.
        **extra: Structured fields added to the record.
    """
    logger.log(level, message, extra=extra)
