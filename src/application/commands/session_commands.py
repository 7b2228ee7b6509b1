"""Session commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange credentials for a session.

    Attributes:
        email: Login email (case-insensitive).
        password: Plaintext password, verified against the stored hash.

    Example:
        >>> result = await handler.handle(
        ...     LoginUser(email="recruiter@example.com", password="talenttrack")
        ... )
    """

    email: str
    password: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Destroy the session bound to a token.

    Attributes:
        token: Opaque session token.
    """

    token: str = field(repr=False)
