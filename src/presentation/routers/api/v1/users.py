"""Users resource router.

Endpoints:
    GET /api/v1/users - Directory listing behind the User Management page
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.queries.handlers.user_handlers import ListUsersHandler
from src.application.queries.user_queries import ListUsers
from src.core.container import get_list_users_handler
from src.core.result import Failure, Success
from src.domain.entities import Session
from src.domain.enums import Action, Subject
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_permission,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas import UserListResponse, UserSchema

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=UserListResponse,
    responses={
        401: {"description": "Not authenticated", "model": ProblemDetails},
        403: {"description": "Missing read:users", "model": ProblemDetails},
    },
    summary="List users",
    description="Return every directory user with role, department and avatar.",
)
async def list_users(
    request: Request,
    session: Annotated[Session, Depends(require_permission(Action.READ, Subject.USERS))],
    handler: Annotated[ListUsersHandler, Depends(get_list_users_handler)],
) -> UserListResponse | JSONResponse:
    """GET /api/v1/users → 200 OK"""
    result = await handler.handle(ListUsers())

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=users):
            return UserListResponse(users=[UserSchema.from_domain(u) for u in users])
