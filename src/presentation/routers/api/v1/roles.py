"""Roles resource router.

Read-only audit view of the permission table.

Endpoints:
    GET /api/v1/roles                     - Every role with its grants
    GET /api/v1/roles/{role}/permissions  - One role's grants
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.queries.handlers.permission_handlers import (
    GetRolePermissionsHandler,
    RolePermissionsResult,
)
from src.application.queries.permission_queries import (
    GetRolePermissions,
    ListRolePermissions,
)
from src.core.container import get_role_permissions_handler
from src.core.result import Failure, Success
from src.domain.enums import Action, Subject, UserRole
from src.domain.entities import Session
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_permission,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas import PermissionSchema, RoleListResponse, RolePermissionsResponse

router = APIRouter(prefix="/roles", tags=["Roles"])

_GUARD_RESPONSES: dict[int | str, dict[str, object]] = {
    401: {"description": "Not authenticated", "model": ProblemDetails},
    403: {"description": "Missing read:users", "model": ProblemDetails},
}


def _to_response(result: RolePermissionsResult) -> RolePermissionsResponse:
    return RolePermissionsResponse(
        role=result.role,
        permissions=[PermissionSchema.from_domain(p) for p in result.permissions],
    )


@router.get(
    "",
    response_model=RoleListResponse,
    responses=_GUARD_RESPONSES,
    summary="List roles",
    description="Return every role with the permissions it is granted.",
)
async def list_roles(
    request: Request,
    session: Annotated[Session, Depends(require_permission(Action.READ, Subject.USERS))],
    handler: Annotated[GetRolePermissionsHandler, Depends(get_role_permissions_handler)],
) -> RoleListResponse | JSONResponse:
    """GET /api/v1/roles → 200 OK"""
    result = await handler.handle_list(ListRolePermissions())

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=entries):
            return RoleListResponse(roles=[_to_response(entry) for entry in entries])


@router.get(
    "/{role}/permissions",
    response_model=RolePermissionsResponse,
    responses={
        **_GUARD_RESPONSES,
        422: {"description": "Unknown role", "model": ProblemDetails},
    },
    summary="Get role permissions",
    description="Return the permissions granted to one role.",
)
async def get_role_permissions(
    request: Request,
    role: Annotated[UserRole, Path(description="Role name")],
    session: Annotated[Session, Depends(require_permission(Action.READ, Subject.USERS))],
    handler: Annotated[GetRolePermissionsHandler, Depends(get_role_permissions_handler)],
) -> RolePermissionsResponse | JSONResponse:
    """GET /api/v1/roles/{role}/permissions → 200 OK"""
    result = await handler.handle(GetRolePermissions(role=role))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=entry):
            return _to_response(entry)
