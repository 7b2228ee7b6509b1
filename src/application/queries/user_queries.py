"""User directory queries."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListUsers:
    """List every user in the directory (user management view)."""
