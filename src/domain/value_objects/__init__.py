"""Immutable values: Permission pairs and normalized emails."""

from src.domain.value_objects.email import Email
from src.domain.value_objects.permission import Permission

__all__ = ["Email", "Permission"]
