"""Session lifecycle events."""

from src.domain.events.base_event import DomainEvent
from src.domain.events.session_events import (
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserLogoutFailed,
    UserLogoutSucceeded,
)

__all__ = [
    "DomainEvent",
    "UserLoginAttempted",
    "UserLoginFailed",
    "UserLoginSucceeded",
    "UserLogoutFailed",
    "UserLogoutSucceeded",
]
