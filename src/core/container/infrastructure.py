"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Password hashing (bcrypt)
- Permission table (built-in or JSON file)
- User directory (in-memory, optionally seeded with demo accounts)
- Session store (in-memory)

Every factory is wrapped in ``lru_cache``; tests reset state with
``factory.cache_clear()``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.authorization import PermissionTable
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.session_store_protocol import SessionStoreProtocol
    from src.domain.protocols.user_repository import UserRepository


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level="DEBUG" if settings.debug else settings.log_level,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with ``settings.bcrypt_rounds``.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_permission_table() -> "PermissionTable":
    """Get the role permission table (app-scoped, read-only).

    Uses ``settings.permission_table_path`` when set, otherwise the built-in
    table.

    Raises:
        PermissionTableError: If the configured file is missing or invalid.
    """
    from src.domain.authorization import DEFAULT_PERMISSION_TABLE
    from src.infrastructure.authorization import load_permission_table

    path = get_settings().permission_table_path
    if not path:
        return DEFAULT_PERMISSION_TABLE
    return load_permission_table(path, logger=get_logger())


@lru_cache()
def get_user_repository() -> "UserRepository":
    """Get the user directory singleton (app-scoped).

    Seeds one demo account per role when ``settings.seed_demo_users`` is on.
    """
    from src.infrastructure.directory import InMemoryUserRepository, build_demo_users

    settings = get_settings()
    users = []
    if settings.seed_demo_users:
        users = build_demo_users(settings.demo_user_password, get_password_service())
        get_logger().info("demo_users_seeded", count=len(users))
    return InMemoryUserRepository(users)


@lru_cache()
def get_session_store() -> "SessionStoreProtocol":
    """Get the session store singleton (app-scoped)."""
    from src.infrastructure.sessions import InMemorySessionStore

    return InMemorySessionStore()
