"""Authorization infrastructure package.

- permission_table_loader.py: JSON permission table loading and validation
"""

from src.infrastructure.authorization.permission_table_loader import (
    PermissionEntry,
    PermissionTableError,
    load_permission_table,
    parse_permission_table,
)

__all__ = [
    "PermissionEntry",
    "PermissionTableError",
    "load_permission_table",
    "parse_permission_table",
]
