"""Route guard.

Decides whether a page may render for the current session. Authentication is
evaluated strictly before authorization, and all required permissions must
hold (conjunction). The guard only decides; navigation happens in the
presentation layer.
"""

from collections.abc import Iterable

from src.domain.authorization.checks import is_granted
from src.domain.authorization.permission_table import (
    DEFAULT_PERMISSION_TABLE,
    PermissionTable,
)
from src.domain.entities import Session
from src.domain.enums import GuardOutcome
from src.domain.value_objects import Permission


def evaluate_route_guard(
    session: Session | None,
    required: Iterable[Permission] = (),
    *,
    table: PermissionTable = DEFAULT_PERMISSION_TABLE,
) -> GuardOutcome:
    """Evaluate a page's access requirements.

    Args:
        session: Current session, or None when nobody is signed in.
        required: Permissions that must all be granted. Empty means any
            authenticated identity may render the page.
        table: Permission table to consult.

    Returns:
        GuardOutcome: REDIRECT_LOGIN without a session, REDIRECT_UNAUTHORIZED
        when any required permission is missing, RENDER otherwise.
    """
    if session is None:
        return GuardOutcome.REDIRECT_LOGIN
    if all(is_granted(session, permission, table=table) for permission in required):
        return GuardOutcome.RENDER
    return GuardOutcome.REDIRECT_UNAUTHORIZED


def missing_permissions(
    session: Session | None,
    required: Iterable[Permission],
    *,
    table: PermissionTable = DEFAULT_PERMISSION_TABLE,
) -> list[Permission]:
    """List the required permissions the session does not hold.

    Used for logging denials; every permission is missing without a session.
    """
    return [p for p in required if not is_granted(session, p, table=table)]
