"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetRolePermissions, CheckPermission).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.permission_queries import (
    CheckPermission,
    GetRolePermissions,
    ListRolePermissions,
)
from src.application.queries.user_queries import ListUsers

__all__ = [
    # Permission queries
    "CheckPermission",
    "GetRolePermissions",
    "ListRolePermissions",
    # User queries
    "ListUsers",
]
