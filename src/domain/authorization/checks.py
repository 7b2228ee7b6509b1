"""Authorization check.

Pure, synchronous permission check against the role carried by a session.
"""

from src.domain.authorization.permission_table import (
    DEFAULT_PERMISSION_TABLE,
    PermissionTable,
)
from src.domain.entities import Session
from src.domain.enums import Action, Subject
from src.domain.value_objects import Permission


def has_permission(
    session: Session | None,
    action: Action,
    subject: Subject,
    *,
    table: PermissionTable = DEFAULT_PERMISSION_TABLE,
) -> bool:
    """Check whether the signed-in identity may perform `action` on `subject`.

    Fails closed: no session means no permission, and a role absent from the
    table holds nothing.

    Args:
        session: Current session, or None when nobody is signed in.
        action: Requested action.
        subject: Subject the action targets.
        table: Permission table to consult.

    Returns:
        bool: True iff (action, subject) is granted to the session's role.

    Example:
        >>> has_permission(viewer_session, Action.UPDATE, Subject.CANDIDATES)
        False
        >>> has_permission(viewer_session, Action.READ, Subject.JOBS)
        True
    """
    if session is None:
        return False
    return table.allows(session.role, Permission(action, subject))


def is_granted(
    session: Session | None,
    permission: Permission,
    *,
    table: PermissionTable = DEFAULT_PERMISSION_TABLE,
) -> bool:
    """Same as has_permission, taking a Permission pair."""
    return has_permission(session, permission.action, permission.subject, table=table)
