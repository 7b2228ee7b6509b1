"""User domain entity.

Directory record for a person who can sign in to TalentTrack.
Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import UserRole


@dataclass
class User:
    """User domain entity.

    Business Rules:
        - Every user holds exactly one role
        - Inactive users cannot sign in
        - Passwords are stored as bcrypt hashes only

    Attributes:
        id: Unique user identifier
        name: Display name
        email: Normalized (lowercase) email address, used as login name
        role: RBAC role
        password_hash: Bcrypt hashed password (never plaintext)
        department: Optional department label (e.g. "HR")
        avatar: Avatar text shown in the UI, defaults to name initials
        is_active: Account active status
        created_at: Timestamp when user was created

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     name="Recruiter User",
        ...     email="recruiter@example.com",
        ...     role=UserRole.RECRUITER,
        ...     password_hash="$2b$12$...",
        ... )
        >>> user.avatar
        'RU'
    """

    id: UUID
    name: str
    email: str
    role: UserRole
    password_hash: str
    department: str | None = None
    avatar: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Derive avatar initials when none were supplied."""
        if not self.avatar:
            self.avatar = initials(self.name)

    def can_login(self) -> bool:
        """Check whether the account may start a session.

        Returns:
            bool: True if account is active.
        """
        return self.is_active


def initials(name: str) -> str:
    """Build up to two uppercase initials from a display name.

    Args:
        name: Display name such as "Manager User".

    Returns:
        str: Initials such as "MU", or "?" for a blank name.
    """
    parts = [part for part in name.split() if part]
    if not parts:
        return "?"
    return "".join(part[0] for part in parts[:2]).upper()
