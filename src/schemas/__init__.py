"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import SessionCreateRequest, PageViewResponse
"""

from src.schemas.auth_schemas import (
    SessionCreateRequest,
    SessionCreateResponse,
)
from src.schemas.common_schemas import IdentitySchema, PermissionSchema
from src.schemas.page_schemas import (
    AffordanceResponse,
    NavigationItemResponse,
    NavigationResponse,
    NavigationSectionResponse,
    PageViewResponse,
)
from src.schemas.permission_schemas import (
    PermissionCheckResponse,
    RoleListResponse,
    RolePermissionsResponse,
)
from src.schemas.session_schemas import CurrentSessionResponse
from src.schemas.user_schemas import UserListResponse, UserSchema

__all__ = [
    # Session (login/logout)
    "SessionCreateRequest",
    "SessionCreateResponse",
    "CurrentSessionResponse",
    # Shared
    "IdentitySchema",
    "PermissionSchema",
    # Roles and permissions
    "PermissionCheckResponse",
    "RoleListResponse",
    "RolePermissionsResponse",
    # User directory
    "UserListResponse",
    "UserSchema",
    # Pages and navigation
    "AffordanceResponse",
    "NavigationItemResponse",
    "NavigationResponse",
    "NavigationSectionResponse",
    "PageViewResponse",
]
