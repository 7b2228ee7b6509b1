"""RBAC authorization model.

Pure functions over an immutable permission table. The session is always
passed explicitly; nothing here reads global state.

Usage:
    from src.domain.authorization import (
        DEFAULT_PERMISSION_TABLE,
        evaluate_route_guard,
        has_permission,
        render_if_permitted,
    )
"""

from src.domain.authorization.checks import has_permission, is_granted
from src.domain.authorization.permission_table import (
    DEFAULT_PERMISSION_TABLE,
    PermissionTable,
    sort_permissions,
)
from src.domain.authorization.render import filter_visible, render_if_permitted
from src.domain.authorization.route_guard import (
    evaluate_route_guard,
    missing_permissions,
)

__all__ = [
    "DEFAULT_PERMISSION_TABLE",
    "PermissionTable",
    "evaluate_route_guard",
    "filter_visible",
    "has_permission",
    "is_granted",
    "missing_permissions",
    "render_if_permitted",
    "sort_permissions",
]
