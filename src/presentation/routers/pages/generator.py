"""Route generator for the page registry.

Converts declarative PageMetadata entries into FastAPI GET routes at
application startup.

Usage:
    from src.presentation.routers.pages.generator import register_pages_from_registry
    from src.presentation.routers.pages.registry import PAGE_REGISTRY

    page_router = APIRouter()
    register_pages_from_registry(page_router, PAGE_REGISTRY)
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import APIRouter, Depends

from src.core.container import get_permission_table
from src.domain.authorization import PermissionTable
from src.domain.entities import Session
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_page_access,
)
from src.presentation.routers.pages.metadata import PageMetadata
from src.presentation.routers.pages.views import build_page_view
from src.schemas import PageViewResponse


def register_pages_from_registry(
    router: APIRouter,
    registry: list[PageMetadata],
) -> None:
    """Generate one GET route per registered page.

    Guarded pages resolve their session through require_page_access(), so a
    denied request never reaches the endpoint and is redirected instead.

    Args:
        router: APIRouter to register routes on.
        registry: Pages to expose.
    """
    for page in registry:
        router.add_api_route(
            path=page.path,
            endpoint=_build_endpoint(page),
            methods=["GET"],
            response_model=PageViewResponse,
            tags=["Pages"],
            summary=page.title,
            name=f"page:{page.path}",
            responses=None if page.public else {
                307: {"description": "Redirect to the login or unauthorized page"}
            },
        )


def _build_endpoint(page: PageMetadata) -> Callable[..., Awaitable[PageViewResponse]]:
    if page.public:

        async def public_page(
            table: Annotated[PermissionTable, Depends(get_permission_table)],
        ) -> PageViewResponse:
            return build_page_view(page, None, table)

        return public_page

    guard = require_page_access(*page.required)

    async def guarded_page(
        session: Annotated[Session, Depends(guard)],
        table: Annotated[PermissionTable, Depends(get_permission_table)],
    ) -> PageViewResponse:
        return build_page_view(page, session, table)

    return guarded_page
