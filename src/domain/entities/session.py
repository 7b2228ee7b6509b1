"""Session domain entity.

Pure business logic, no framework dependencies.

A session binds an opaque token to the identity that signed in. Sessions are
created on login and destroyed on logout; the identity (and therefore the
role) never changes for the lifetime of a session.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.entities.user import User
from src.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class Identity:
    """Snapshot of the authenticated user carried by a session.

    Attributes:
        user_id: Directory id of the user.
        name: Display name.
        email: Login email.
        role: Role used for every authorization decision in the session.
        department: Department label, if the directory has one.
        avatar: Avatar text for the user menu (initials by default).
    """

    user_id: UUID
    name: str
    email: str
    role: UserRole
    department: str | None = None
    avatar: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        """Build an identity snapshot from a directory user."""
        return cls(
            user_id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            department=user.department,
            avatar=user.avatar,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Session:
    """Authenticated session.

    Attributes:
        id: Unique session identifier.
        token: Opaque bearer token presented by the client. Never logged.
        identity: Who is signed in.
        created_at: When the session was created.

    Example:
        >>> session = Session(
        ...     id=uuid7(),
        ...     token="n0t-a-real-token",
        ...     identity=Identity(
        ...         user_id=uuid7(),
        ...         name="Viewer User",
        ...         email="viewer@example.com",
        ...         role=UserRole.VIEWER,
        ...     ),
        ... )
        >>> session.role
        <UserRole.VIEWER: 'viewer'>
    """

    id: UUID
    token: str = field(repr=False)
    identity: Identity
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def role(self) -> UserRole:
        """Role of the signed-in identity."""
        return self.identity.role
