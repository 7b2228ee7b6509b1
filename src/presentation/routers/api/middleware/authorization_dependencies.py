"""Route guard dependencies.

FastAPI bindings of the route guard. Both dependencies evaluate the same
decision (authentication first, then every required permission) and differ
only in how a denial is surfaced:

    - require_page_access: page routes, denial raises PageRedirect which the
      exception handler turns into a redirect to the login or unauthorized page.
    - require_all_permissions: JSON API routes, denial raises HTTPException
      401 (no session) or 403 (missing permission).

Usage:
    @router.get("/candidates")
    async def candidates_page(
        session: Annotated[Session, Depends(require_page_access(READ_CANDIDATES))],
    ):
        ...

    @router.get("/api/v1/roles")
    async def list_roles(
        session: Annotated[Session, Depends(require_all_permissions(READ_USERS))],
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from src.core.config import settings
from src.core.container import get_logger, get_permission_table
from src.domain.authorization import (
    PermissionTable,
    evaluate_route_guard,
    missing_permissions,
)
from src.domain.entities import Session
from src.domain.enums import Action, GuardOutcome, Subject
from src.domain.protocols import LoggerProtocol
from src.domain.value_objects import Permission
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_session,
)


class PageRedirect(Exception):
    """Raised by page guards to redirect the browser.

    Attributes:
        outcome: Guard decision that caused the redirect.
        location: Target path.
    """

    def __init__(self, outcome: GuardOutcome, location: str) -> None:
        super().__init__(f"{outcome.value} -> {location}")
        self.outcome = outcome
        self.location = location


def redirect_target(outcome: GuardOutcome) -> str:
    """Map a denial outcome to the configured page path."""
    if outcome is GuardOutcome.REDIRECT_LOGIN:
        return settings.login_path
    return settings.unauthorized_path


def _log_denial(
    logger: LoggerProtocol,
    request: Request,
    session: Session | None,
    required: tuple[Permission, ...],
    outcome: GuardOutcome,
    table: PermissionTable,
) -> None:
    logger.warning(
        "route_guard_denied",
        path=request.url.path,
        outcome=outcome.value,
        role=session.role.value if session else None,
        missing=[str(p) for p in missing_permissions(session, required, table=table)],
    )


def require_page_access(
    *required: Permission,
) -> Callable[..., Awaitable[Session]]:
    """Create a page dependency enforcing the route guard.

    Args:
        *required: Permissions that must all be granted. None means any
            signed-in identity may view the page.

    Returns:
        Dependency resolving to the current Session.

    Raises:
        PageRedirect: To the login page without a session, to the
            unauthorized page when a permission is missing.
    """

    async def page_guard(
        request: Request,
        session: Annotated[Session | None, Depends(get_current_session)],
        table: Annotated[PermissionTable, Depends(get_permission_table)],
        logger: Annotated[LoggerProtocol, Depends(get_logger)],
    ) -> Session:
        outcome = evaluate_route_guard(session, required, table=table)
        if outcome is not GuardOutcome.RENDER or session is None:
            _log_denial(logger, request, session, required, outcome, table)
            raise PageRedirect(outcome, redirect_target(outcome))
        return session

    return page_guard


def require_all_permissions(
    *required: Permission,
) -> Callable[..., Awaitable[Session]]:
    """Create an API dependency requiring all specified permissions.

    Args:
        *required: Permissions that must all be granted.

    Returns:
        Dependency resolving to the current Session.

    Raises:
        HTTPException 401: If no session.
        HTTPException 403: If any permission is missing.
    """

    async def permission_checker(
        request: Request,
        session: Annotated[Session | None, Depends(get_current_session)],
        table: Annotated[PermissionTable, Depends(get_permission_table)],
        logger: Annotated[LoggerProtocol, Depends(get_logger)],
    ) -> Session:
        outcome = evaluate_route_guard(session, required, table=table)
        if outcome is GuardOutcome.RENDER and session is not None:
            return session

        _log_denial(logger, request, session, required, outcome, table)
        if outcome is GuardOutcome.REDIRECT_LOGIN:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Authentication required",
                headers={"WWW-Authenticate": "Bearer"},
            )
        missing = ", ".join(str(p) for p in missing_permissions(session, required, table=table))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Permission denied: {missing}",
        )

    return permission_checker


def require_permission(
    action: Action,
    subject: Subject,
) -> Callable[..., Awaitable[Session]]:
    """Shorthand for require_all_permissions with a single pair."""
    return require_all_permissions(Permission(action, subject))
