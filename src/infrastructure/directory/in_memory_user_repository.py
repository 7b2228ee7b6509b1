"""In-memory implementation of the UserRepository protocol.

Directory records live in a process-local dictionary keyed by normalized
email. Lost on restart.
"""

from src.domain.entities.user import User
from src.domain.value_objects import Email


class InMemoryUserRepository:
    """Dictionary-backed user directory.

    This class does NOT inherit from UserRepository protocol (structural typing).

    Example:
        >>> repo = InMemoryUserRepository()
        >>> await repo.save(user)
        >>> await repo.find_by_email("Recruiter@Example.com")
        User(...)
    """

    def __init__(self, users: list[User] | None = None) -> None:
        self._by_email: dict[str, User] = {}
        for user in users or []:
            self._by_email[_normalize(user.email)] = user

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: Email as typed by the user.

        Returns:
            User if found, None otherwise (including for malformed emails).
        """
        try:
            key = _normalize(email)
        except ValueError:
            return None
        return self._by_email.get(key)

    async def list_all(self) -> list[User]:
        """Return every user in insertion order."""
        return list(self._by_email.values())

    async def save(self, user: User) -> None:
        """Add a user, replacing any existing record with the same email.

        Raises:
            ValueError: If the user's email is malformed.
        """
        key = _normalize(user.email)
        user.email = key
        self._by_email[key] = user


def _normalize(email: str) -> str:
    return Email(email).value
