"""Permission query handlers.

Read-only views over the role permission table.
"""

from dataclasses import dataclass

from src.application.queries.permission_queries import (
    CheckPermission,
    GetRolePermissions,
    ListRolePermissions,
)
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.authorization import PermissionTable, sort_permissions
from src.domain.enums import UserRole
from src.domain.value_objects import Permission


@dataclass
class RolePermissionsResult:
    """Grants of one role, ordered by subject then action."""

    role: UserRole
    permissions: list[Permission]


@dataclass
class PermissionCheckResult:
    """Outcome of a single permission check."""

    permission: Permission
    allowed: bool


class GetRolePermissionsHandler:
    """Handler for GetRolePermissions and ListRolePermissions."""

    def __init__(self, table: PermissionTable) -> None:
        self._table = table

    async def handle(
        self, query: GetRolePermissions
    ) -> Result[RolePermissionsResult, DomainError]:
        """Return one role's grants.

        Every UserRole has an entry, so this never fails.
        """
        return Success(value=self._result_for(query.role))

    async def handle_list(
        self, query: ListRolePermissions
    ) -> Result[list[RolePermissionsResult], DomainError]:
        """Return every role's grants in role declaration order."""
        return Success(value=[self._result_for(role) for role in UserRole])

    def _result_for(self, role: UserRole) -> RolePermissionsResult:
        return RolePermissionsResult(
            role=role,
            permissions=sort_permissions(self._table.grants_for(role)),
        )


class CheckPermissionHandler:
    """Handler for CheckPermission."""

    def __init__(self, table: PermissionTable) -> None:
        self._table = table

    async def handle(
        self, query: CheckPermission
    ) -> Result[PermissionCheckResult, DomainError]:
        """Evaluate the check; an absent role is always denied."""
        permission = Permission(query.action, query.subject)
        return Success(
            value=PermissionCheckResult(
                permission=permission,
                allowed=self._table.allows(query.role, permission),
            )
        )
