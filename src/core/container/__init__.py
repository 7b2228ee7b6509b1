"""Dependency container.

Each factory is an ``lru_cache`` singleton (or a cheap per-request builder
for handlers); routes reach them through ``Depends``.
"""

from src.core.container.events import get_event_bus
from src.core.container.handlers import (
    get_check_permission_handler,
    get_list_users_handler,
    get_login_user_handler,
    get_logout_user_handler,
    get_role_permissions_handler,
)
from src.core.container.infrastructure import (
    get_logger,
    get_password_service,
    get_permission_table,
    get_session_store,
    get_user_repository,
)

__all__ = [
    "get_check_permission_handler",
    "get_event_bus",
    "get_list_users_handler",
    "get_login_user_handler",
    "get_logger",
    "get_logout_user_handler",
    "get_password_service",
    "get_permission_table",
    "get_role_permissions_handler",
    "get_session_store",
    "get_user_repository",
]
