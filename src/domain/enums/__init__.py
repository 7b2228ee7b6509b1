"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - UserRole: RBAC roles (admin, recruiter, hiring_manager, viewer)
    - Action: Operations on subjects (create, read, update, delete)
    - Subject: Protected resource categories
    - GuardOutcome: Route guard decisions
"""

from src.domain.enums.guard_outcome import GuardOutcome
from src.domain.enums.permission import Action, Subject
from src.domain.enums.user_role import UserRole

__all__ = [
    "Action",
    "GuardOutcome",
    "Subject",
    "UserRole",
]
