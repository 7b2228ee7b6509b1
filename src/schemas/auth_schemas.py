"""Login request and response bodies (POST /api/v1/sessions)."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.schemas.common_schemas import IdentitySchema


class SessionCreateRequest(BaseModel):
    """Credentials exchanged for a session token."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "recruiter@example.com", "password": "talenttrack"}
        }
    )

    email: EmailStr = Field(..., description="Login email, any case")
    password: str = Field(..., min_length=1, max_length=128, description="Plaintext password")


class SessionCreateResponse(BaseModel):
    """Issued session. The same token is set as an HTTP-only cookie."""

    token: str = Field(..., description="Opaque session token; send as a Bearer token")
    token_type: str = Field(default="bearer")
    identity: IdentitySchema
