"""Conditional render wrapper.

Chooses between content and a fallback based on a single optional permission.
It never redirects and never checks authentication on its own: a missing
session simply fails the permission check.
"""

from collections.abc import Iterable
from typing import Any, TypeVar

from src.domain.authorization.checks import is_granted
from src.domain.authorization.permission_table import (
    DEFAULT_PERMISSION_TABLE,
    PermissionTable,
)
from src.domain.entities import Session
from src.domain.value_objects import Permission

C = TypeVar("C")  # Content type
T = TypeVar("T")  # Item type


def render_if_permitted(
    session: Session | None,
    content: C,
    *,
    required: Permission | None = None,
    fallback: Any = None,
    table: PermissionTable = DEFAULT_PERMISSION_TABLE,
) -> C | Any:
    """Return `content` when permitted, otherwise `fallback`.

    Args:
        session: Current session, or None.
        content: Value produced when access is allowed.
        required: Permission gating the content. None means ungated.
        fallback: Value produced when access is denied (default None).
        table: Permission table to consult.

    Returns:
        `content` or `fallback`.

    Example:
        >>> render_if_permitted(
        ...     recruiter_session,
        ...     "Delete",
        ...     required=Permission(Action.DELETE, Subject.CANDIDATES),
        ... ) is None
        True
    """
    if required is None:
        return content
    if is_granted(session, required, table=table):
        return content
    return fallback


def filter_visible(
    session: Session | None,
    items: Iterable[tuple[T, Permission | None]],
    *,
    table: PermissionTable = DEFAULT_PERMISSION_TABLE,
) -> list[T]:
    """Keep the items whose permission the session holds.

    Args:
        session: Current session, or None.
        items: (item, required permission or None) pairs, in display order.
        table: Permission table to consult.

    Returns:
        list: Visible items, order preserved.
    """
    visible: list[T] = []
    for item, required in items:
        if render_if_permitted(session, True, required=required, fallback=False, table=table):
            visible.append(item)
    return visible
