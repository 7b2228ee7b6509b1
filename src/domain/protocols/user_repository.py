"""Port for the user directory."""

from typing import Protocol

from src.domain.entities.user import User


class UserRepository(Protocol):
    """Lookup and storage of directory users.

    Emails are compared in normalized (lowercase) form; a malformed email
    simply matches nobody.
    """

    async def find_by_email(self, email: str) -> User | None:
        """User signing in with `email`, or None."""
        ...

    async def list_all(self) -> list[User]: ...

    async def save(self, user: User) -> None:
        """Store `user`, replacing whoever had the same email."""
        ...
