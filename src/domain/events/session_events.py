"""Session lifecycle domain events.

Login and logout each emit an ATTEMPTED event before the operation and a
SUCCEEDED or FAILED event after it. Session tokens never appear in events.

Usage:
    >>> await event_bus.publish(UserLoginAttempted(email=cmd.email))
    >>> ...
    >>> await event_bus.publish(UserLoginSucceeded(
    ...     user_id=user.id,
    ...     email=user.email,
    ...     role=user.role.value,
    ...     session_id=session.id,
    ... ))
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


# ============================================================================
# Login
# ============================================================================


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLoginAttempted(DomainEvent):
    """Login was attempted (BEFORE credential verification).

    Attributes:
        email: Email address provided. May not exist in the directory.
    """

    email: str


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLoginSucceeded(DomainEvent):
    """Login succeeded and a session was created.

    Attributes:
        user_id: Authenticated user.
        email: User email.
        role: Role bound to the new session.
        session_id: Created session id.
    """

    user_id: UUID
    email: str
    role: str
    session_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLoginFailed(DomainEvent):
    """Login failed.

    Attributes:
        email: Email address provided.
        reason: Machine-readable failure reason (e.g. "invalid_credentials").
    """

    email: str
    reason: str


# ============================================================================
# Logout
# ============================================================================


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLogoutSucceeded(DomainEvent):
    """Session was destroyed.

    Attributes:
        user_id: User who signed out.
        session_id: Destroyed session id.
    """

    user_id: UUID
    session_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLogoutFailed(DomainEvent):
    """Logout was requested for a token with no live session.

    Attributes:
        reason: Machine-readable failure reason.
    """

    reason: str
