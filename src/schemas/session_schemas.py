"""Session response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.schemas.common_schemas import IdentitySchema, PermissionSchema


class CurrentSessionResponse(BaseModel):
    """Current session with the permissions its role is granted.

    GET /api/v1/sessions/current
    """

    session_id: UUID = Field(..., description="Session identifier")
    created_at: datetime = Field(..., description="When the session was created")
    identity: IdentitySchema = Field(..., description="Signed-in identity")
    permissions: list[PermissionSchema] = Field(
        default_factory=list,
        description="Grants of the identity's role, ordered by subject then action",
    )
