"""Permissions resource router.

Endpoints:
    GET /api/v1/permissions/check?action=&subject= - Check one pair
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.queries.handlers.permission_handlers import CheckPermissionHandler
from src.application.queries.permission_queries import CheckPermission
from src.core.container import get_check_permission_handler
from src.core.result import Failure, Success
from src.domain.enums import Action, Subject
from src.presentation.routers.api.middleware.auth_dependencies import OptionalSession
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas import PermissionCheckResponse

router = APIRouter(prefix="/permissions", tags=["Permissions"])


@router.get(
    "/check",
    response_model=PermissionCheckResponse,
    responses={422: {"description": "Unknown action or subject", "model": ProblemDetails}},
    summary="Check permission",
    description=(
        "Report whether the current session may perform an action on a subject. "
        "Without a session the answer is always false."
    ),
)
async def check_permission(
    request: Request,
    action: Annotated[Action, Query(description="Requested action")],
    subject: Annotated[Subject, Query(description="Requested subject")],
    session: OptionalSession,
    handler: Annotated[CheckPermissionHandler, Depends(get_check_permission_handler)],
) -> PermissionCheckResponse | JSONResponse:
    """GET /api/v1/permissions/check → 200 OK"""
    result = await handler.handle(
        CheckPermission(
            role=session.role if session else None,
            action=action,
            subject=subject,
        )
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=check):
            return PermissionCheckResponse(
                action=check.permission.action,
                subject=check.permission.subject,
                allowed=check.allowed,
            )
