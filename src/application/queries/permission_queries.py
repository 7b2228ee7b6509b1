"""Permission queries (CQRS read operations).

Queries represent requests for authorization information. They are immutable
dataclasses and never change state.
"""

from dataclasses import dataclass

from src.domain.enums import Action, Subject, UserRole


@dataclass(frozen=True, kw_only=True)
class GetRolePermissions:
    """Get the grants of a single role.

    Attributes:
        role: Role whose grants are requested.
    """

    role: UserRole


@dataclass(frozen=True, kw_only=True)
class ListRolePermissions:
    """List the grants of every role (audit view)."""


@dataclass(frozen=True, kw_only=True)
class CheckPermission:
    """Ask whether a role may perform an action on a subject.

    Attributes:
        role: Role of the current session, or None when unauthenticated.
        action: Requested action.
        subject: Subject the action targets.
    """

    role: UserRole | None
    action: Action
    subject: Subject
