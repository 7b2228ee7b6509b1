"""Handler dependency factories.

Request-scoped handler instances built from app-scoped singletons:
- Login / logout commands
- Role permission queries
- User directory query
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_password_service,
    get_permission_table,
    get_session_store,
    get_user_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
    from src.application.queries.handlers.permission_handlers import (
        CheckPermissionHandler,
        GetRolePermissionsHandler,
    )
    from src.application.queries.handlers.user_handlers import ListUsersHandler
    from src.domain.authorization import PermissionTable


# ============================================================================
# Session Handler Factories
# ============================================================================


async def get_login_user_handler() -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped).

    Dependencies:
    - UserRepository (app-scoped singleton)
    - BcryptPasswordService (app-scoped singleton)
    - SessionStore (app-scoped singleton)
    - EventBus (app-scoped singleton)
    """
    from src.application.commands.handlers.login_user_handler import LoginUserHandler

    return LoginUserHandler(
        user_repo=get_user_repository(),
        password_service=get_password_service(),
        session_store=get_session_store(),
        event_bus=get_event_bus(),
    )


async def get_logout_user_handler() -> "LogoutUserHandler":
    """Get LogoutUser command handler (request-scoped)."""
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler

    return LogoutUserHandler(
        session_store=get_session_store(),
        event_bus=get_event_bus(),
    )


# ============================================================================
# Permission Query Handler Factories
# ============================================================================


async def get_role_permissions_handler(
    table: "PermissionTable" = Depends(get_permission_table),
) -> "GetRolePermissionsHandler":
    """Get role permissions query handler (request-scoped)."""
    from src.application.queries.handlers.permission_handlers import (
        GetRolePermissionsHandler,
    )

    return GetRolePermissionsHandler(table=table)


async def get_check_permission_handler(
    table: "PermissionTable" = Depends(get_permission_table),
) -> "CheckPermissionHandler":
    """Get permission check query handler (request-scoped)."""
    from src.application.queries.handlers.permission_handlers import (
        CheckPermissionHandler,
    )

    return CheckPermissionHandler(table=table)


# ============================================================================
# User Directory Query Handler Factories
# ============================================================================


async def get_list_users_handler() -> "ListUsersHandler":
    """Get user listing query handler (request-scoped)."""
    from src.application.queries.handlers.user_handlers import ListUsersHandler

    return ListUsersHandler(user_repo=get_user_repository())
