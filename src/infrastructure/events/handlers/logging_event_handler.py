"""Audit logging of session lifecycle events.

Attempts and successes log at INFO, failures at WARNING. Every line carries
``event_id`` and ``occurred_at`` (ISO 8601, UTC) plus whatever identifiers the
event has; passwords and tokens are never logged.
"""

from typing import Any

from src.domain.events.base_event import DomainEvent
from src.domain.events.session_events import (
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserLogoutFailed,
    UserLogoutSucceeded,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


def _envelope(event: DomainEvent) -> dict[str, Any]:
    return {"event_id": str(event.event_id), "occurred_at": event.occurred_at.isoformat()}


class LoggingEventHandler:
    """One ``handle_<event>`` coroutine per session event.

    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> bus.subscribe(UserLoginSucceeded, handler.handle_user_login_succeeded)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle_user_login_attempted(self, event: UserLoginAttempted) -> None:
        self._logger.info("user_login_attempted", **_envelope(event), email=event.email)

    async def handle_user_login_succeeded(self, event: UserLoginSucceeded) -> None:
        self._logger.info(
            "user_login_succeeded",
            **_envelope(event),
            user_id=str(event.user_id),
            email=event.email,
            role=event.role,
            session_id=str(event.session_id),
        )

    async def handle_user_login_failed(self, event: UserLoginFailed) -> None:
        self._logger.warning(
            "user_login_failed", **_envelope(event), email=event.email, reason=event.reason
        )

    async def handle_user_logout_succeeded(self, event: UserLogoutSucceeded) -> None:
        self._logger.info(
            "user_logout_succeeded",
            **_envelope(event),
            user_id=str(event.user_id),
            session_id=str(event.session_id),
        )

    async def handle_user_logout_failed(self, event: UserLogoutFailed) -> None:
        """Logout presented a token with no live session."""
        self._logger.warning("user_logout_failed", **_envelope(event), reason=event.reason)
