"""Common schemas used across multiple API endpoints.

Provides the wire shapes of permissions and identities shared by the
session, role and permission endpoints.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import Identity
from src.domain.enums import Action, Subject, UserRole
from src.domain.value_objects import Permission


class PermissionSchema(BaseModel):
    """An (action, subject) pair.

    Attributes:
        action: Operation kind.
        subject: Protected resource category.
    """

    action: Action = Field(..., description="Operation kind", examples=["read"])
    subject: Subject = Field(
        ..., description="Protected resource category", examples=["candidates"]
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_domain(cls, permission: Permission) -> "PermissionSchema":
        """Convert a domain Permission to its wire form."""
        return cls(action=permission.action, subject=permission.subject)


class IdentitySchema(BaseModel):
    """Signed-in identity as exposed to clients."""

    user_id: UUID = Field(..., description="Directory id of the user")
    name: str = Field(..., description="Display name", examples=["Viewer User"])
    email: str = Field(..., description="Login email", examples=["viewer@example.com"])
    role: UserRole = Field(..., description="Role of the user", examples=["viewer"])
    department: str | None = Field(None, description="Department", examples=["HR"])
    avatar: str | None = Field(None, description="Avatar text (initials)", examples=["VU"])

    @classmethod
    def from_domain(cls, identity: Identity) -> "IdentitySchema":
        return cls(
            user_id=identity.user_id,
            name=identity.name,
            email=identity.email,
            role=identity.role,
            department=identity.department,
            avatar=identity.avatar,
        )
