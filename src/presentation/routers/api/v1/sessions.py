"""Login, current identity and logout, modelled as a session resource.

    POST   /sessions          sign in
    GET    /sessions/current  who am I, and what may I do
    DELETE /sessions/current  sign out
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
from src.application.commands.session_commands import LoginUser, LogoutUser
from src.core.config import settings
from src.core.container import (
    get_login_user_handler,
    get_logout_user_handler,
    get_permission_table,
)
from src.core.result import Failure, Success
from src.domain.authorization import PermissionTable, sort_permissions
from src.presentation.routers.api.middleware.auth_dependencies import CurrentSession
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas import (
    CurrentSessionResponse,
    IdentitySchema,
    PermissionSchema,
    SessionCreateRequest,
    SessionCreateResponse,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionCreateResponse,
    responses={
        201: {"description": "Signed in"},
        401: {"description": "Invalid credentials", "model": ProblemDetails},
        403: {"description": "Account inactive", "model": ProblemDetails},
    },
    summary="Sign in",
    description="Authenticate with email and password and start a session.",
)
async def create_session(
    request: Request,
    response: Response,
    data: SessionCreateRequest,
    handler: Annotated[LoginUserHandler, Depends(get_login_user_handler)],
) -> SessionCreateResponse | JSONResponse:
    """Sign in.

    The token comes back in the body and as an HTTP-only cookie, so browser
    page requests carry it without client code. Failures are 401 (bad
    credentials) or 403 (inactive account) problem responses.
    """
    result = await handler.handle(LoginUser(email=data.email, password=data.password))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=session):
            response.set_cookie(
                key=settings.session_cookie_name,
                value=session.token,
                httponly=True,
                samesite="lax",
                secure=settings.session_cookie_secure,
            )
            return SessionCreateResponse(
                token=session.token,
                identity=IdentitySchema.from_domain(session.identity),
            )


@router.get(
    "/current",
    response_model=CurrentSessionResponse,
    responses={401: {"description": "Not authenticated", "model": ProblemDetails}},
    summary="Get current session",
    description="Return the signed-in identity and the permissions of its role.",
)
async def get_current_session_view(
    session: CurrentSession,
    table: Annotated[PermissionTable, Depends(get_permission_table)],
) -> CurrentSessionResponse:
    """Identity of the caller with its grants in display order."""
    return CurrentSessionResponse(
        session_id=session.id,
        created_at=session.created_at,
        identity=IdentitySchema.from_domain(session.identity),
        permissions=[
            PermissionSchema.from_domain(p)
            for p in sort_permissions(table.grants_for(session.role))
        ],
    )


@router.delete(
    "/current",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Signed out"},
        401: {"description": "Not authenticated", "model": ProblemDetails},
    },
    summary="Sign out",
    description="Logout by destroying the current session.",
)
async def delete_current_session(
    request: Request,
    session: CurrentSession,
    handler: Annotated[LogoutUserHandler, Depends(get_logout_user_handler)],
) -> Response:
    """Sign out and clear the session cookie."""
    result = await handler.handle(LogoutUser(token=session.token))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success():
            response = Response(status_code=status.HTTP_204_NO_CONTENT)
            response.delete_cookie(key=settings.session_cookie_name)
            return response
