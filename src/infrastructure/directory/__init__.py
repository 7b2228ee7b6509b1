"""User directory adapters."""

from src.infrastructure.directory.demo_users import DEMO_ACCOUNTS, build_demo_users
from src.infrastructure.directory.in_memory_user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "DEMO_ACCOUNTS",
    "InMemoryUserRepository",
    "build_demo_users",
]
