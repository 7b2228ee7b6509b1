"""Role and permission response schemas.

Endpoints:
    GET /api/v1/roles                     - Full permission table
    GET /api/v1/roles/{role}/permissions  - One role's grants
    GET /api/v1/permissions/check         - Single permission check
"""

from pydantic import BaseModel, Field

from src.domain.enums import Action, Subject, UserRole
from src.schemas.common_schemas import PermissionSchema


class RolePermissionsResponse(BaseModel):
    """Grants of a single role."""

    role: UserRole = Field(..., description="Role", examples=["recruiter"])
    permissions: list[PermissionSchema] = Field(
        default_factory=list,
        description="Granted (action, subject) pairs",
    )


class RoleListResponse(BaseModel):
    """Permission table for audit, one entry per role."""

    roles: list[RolePermissionsResponse] = Field(
        ..., description="Every role with its grants"
    )


class PermissionCheckResponse(BaseModel):
    """Outcome of checking one pair against the current session."""

    action: Action = Field(..., description="Requested action")
    subject: Subject = Field(..., description="Requested subject")
    allowed: bool = Field(..., description="Whether the session holds the grant")
