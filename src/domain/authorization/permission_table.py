"""Role permission table.

Static mapping from role to the set of permissions that role holds. The table
is read-only once built: every role has an entry (possibly empty), duplicate
grants collapse, and looking up something that is not a role yields no
permissions instead of raising.

Usage:
    from src.domain.authorization import DEFAULT_PERMISSION_TABLE

    grants = DEFAULT_PERMISSION_TABLE.grants_for(UserRole.VIEWER)
    DEFAULT_PERMISSION_TABLE.allows(UserRole.RECRUITER, Permission(Action.DELETE, Subject.CANDIDATES))
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from src.domain.enums import Action, Subject, UserRole
from src.domain.value_objects import Permission

_EMPTY: frozenset[Permission] = frozenset()


class PermissionTable(Mapping[UserRole, frozenset[Permission]]):
    """Immutable role -> permissions mapping.

    Behaves as a read-only Mapping keyed by every UserRole member.

    Args:
        grants: Permissions per role. Roles missing from `grants` get an
            empty entry. Iterables are normalized to frozensets.

    Raises:
        TypeError: If a key is not a UserRole or a grant is not a Permission.
    """

    __slots__ = ("_entries",)

    def __init__(self, grants: Mapping[UserRole, Iterable[Permission]]) -> None:
        entries: dict[UserRole, frozenset[Permission]] = {role: _EMPTY for role in UserRole}
        for role, permissions in grants.items():
            if not isinstance(role, UserRole):
                raise TypeError(f"permission table key must be a UserRole, got {role!r}")
            normalized = frozenset(permissions)
            for permission in normalized:
                if not isinstance(permission, Permission):
                    raise TypeError(f"grant for {role.value} must be a Permission, got {permission!r}")
            entries[role] = normalized
        self._entries = MappingProxyType(entries)

    def __getitem__(self, role: UserRole) -> frozenset[Permission]:
        return self._entries[role]

    def __iter__(self) -> Iterator[UserRole]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        counts = ", ".join(f"{role.value}={len(grants)}" for role, grants in self._entries.items())
        return f"PermissionTable({counts})"

    def grants_for(self, role: UserRole | str | None) -> frozenset[Permission]:
        """Return the permissions held by a role.

        Unknown roles (including None and arbitrary strings) resolve to the
        empty set.

        Args:
            role: Role member, raw role value, or None.

        Returns:
            frozenset[Permission]: Granted permissions.
        """
        if role is None:
            return _EMPTY
        if not isinstance(role, UserRole):
            if not UserRole.is_valid(role):
                return _EMPTY
            role = UserRole(role)
        return self._entries.get(role, _EMPTY)

    def allows(self, role: UserRole | str | None, permission: Permission) -> bool:
        """Check whether a role holds a permission.

        Args:
            role: Role member, raw role value, or None.
            permission: Permission being checked.

        Returns:
            bool: True only for an explicit grant.
        """
        return permission in self.grants_for(role)

    def as_entries(self) -> dict[str, list[dict[str, str]]]:
        """Serialize to the audit format.

        Returns:
            dict: ``{role: [{"action": ..., "subject": ...}, ...]}`` with
            grants ordered by subject then action declaration order.
        """
        return {
            role.value: [
                {"action": permission.action.value, "subject": permission.subject.value}
                for permission in sort_permissions(grants)
            ]
            for role, grants in self._entries.items()
        }


def sort_permissions(permissions: Iterable[Permission]) -> list[Permission]:
    """Order permissions by subject, then action, in enum declaration order."""
    subject_order = {subject: index for index, subject in enumerate(Subject)}
    action_order = {action: index for index, action in enumerate(Action)}
    return sorted(
        permissions,
        key=lambda p: (subject_order[p.subject], action_order[p.action]),
    )


def _grant(subject: Subject, *actions: Action) -> set[Permission]:
    return {Permission(action, subject) for action in actions}


_CRU = (Action.CREATE, Action.READ, Action.UPDATE)

DEFAULT_PERMISSION_TABLE = PermissionTable(
    {
        UserRole.ADMIN: {
            Permission(action, subject) for subject in Subject for action in Action
        },
        UserRole.RECRUITER: (
            _grant(Subject.CANDIDATES, *_CRU)
            | _grant(Subject.JOBS, *_CRU)
            | _grant(Subject.INTERVIEWS, *_CRU)
            | _grant(Subject.USERS, Action.READ)
        ),
        UserRole.HIRING_MANAGER: (
            _grant(Subject.CANDIDATES, Action.READ, Action.UPDATE)
            | _grant(Subject.JOBS, Action.READ)
            | _grant(Subject.INTERVIEWS, *_CRU)
            | _grant(Subject.USERS, Action.READ)
        ),
        UserRole.VIEWER: (
            _grant(Subject.CANDIDATES, Action.READ)
            | _grant(Subject.JOBS, Action.READ)
            | _grant(Subject.INTERVIEWS, Action.READ)
        ),
    }
)
