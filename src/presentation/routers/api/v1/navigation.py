"""Navigation resource router.

Endpoints:
    GET /api/v1/navigation - Sidebar and user menu visible to the session
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.core.container import get_permission_table
from src.domain.authorization import PermissionTable
from src.presentation.routers.api.middleware.auth_dependencies import CurrentSession
from src.presentation.routers.api.v1.errors import ProblemDetails
from src.presentation.routers.pages.registry import NAVIGATION_SECTIONS, USER_MENU
from src.presentation.routers.pages.views import build_navigation
from src.schemas import NavigationResponse

router = APIRouter(prefix="/navigation", tags=["Navigation"])


@router.get(
    "",
    response_model=NavigationResponse,
    responses={401: {"description": "Not authenticated", "model": ProblemDetails}},
    summary="Get navigation",
    description="Return the navigation links the current role may follow.",
)
async def get_navigation(
    session: CurrentSession,
    table: Annotated[PermissionTable, Depends(get_permission_table)],
) -> NavigationResponse:
    """GET /api/v1/navigation → 200 OK"""
    return build_navigation(session, NAVIGATION_SECTIONS, USER_MENU, table)
