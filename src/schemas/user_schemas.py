"""User directory response schemas.

Endpoints:
    GET /api/v1/users - Directory listing for user management
"""

from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import User
from src.domain.enums import UserRole


class UserSchema(BaseModel):
    """One directory entry. The password hash is never exposed."""

    id: UUID = Field(..., description="Directory id")
    name: str = Field(..., description="Display name", examples=["Recruiter User"])
    email: str = Field(..., description="Login email", examples=["recruiter@example.com"])
    role: UserRole = Field(..., description="Role", examples=["recruiter"])
    department: str | None = Field(None, description="Department", examples=["HR"])
    avatar: str | None = Field(None, description="Avatar text (initials)", examples=["RU"])
    is_active: bool = Field(..., description="Whether the account may sign in")

    @classmethod
    def from_domain(cls, user: User) -> "UserSchema":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            department=user.department,
            avatar=user.avatar,
            is_active=user.is_active,
        )


class UserListResponse(BaseModel):
    """Every directory user in directory order."""

    users: list[UserSchema] = Field(..., description="Directory users")
