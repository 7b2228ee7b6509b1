"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logs (message + key-value context).

Security:
    - NEVER log passwords or session tokens
    - Log user ids and roles, not credentials

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("login_succeeded", user_id=str(user.id), role=user.role.value)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("route_guard_denied", path="/settings")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the 5 standard log levels and context binding for
    request-scoped logging.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for failures needing immediate attention."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...
