"""structlog logger writing to stdout.

Development gets colored key=value lines; every other environment gets one
JSON object per line. Values bound through ``structlog.contextvars`` (the
request trace id) appear on every record.

Satisfies LoggerProtocol structurally.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _level_number(level: str) -> int:
    """Numeric level for a level name; unknown names mean INFO."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def _renderer(use_json: bool) -> structlog.types.Processor:
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Structured stdout logger.

    Args:
        use_json: Render JSON lines instead of the colored console format.
        level: Lowest level that is emitted.

    Example:
        >>> logger = ConsoleAdapter(use_json=True, level="DEBUG")
        >>> logger.warning("route_guard_denied", path="/settings", role="viewer")
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                _renderer(use_json),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrapping(cls, bound_logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound_logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Emit an error; an exception adds ``error_type`` and ``error_message``."""
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Adapter whose records all carry `context`; this one is unchanged."""
        return self._wrapping(self._logger.bind(**context))
