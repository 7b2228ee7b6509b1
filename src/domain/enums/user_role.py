"""User roles for RBAC authorization.

Every authenticated session carries exactly one role. Roles are flat: there is
no inheritance between them, each role's grants are listed explicitly in the
permission table.

Roles:
    - admin: Full access to every subject
    - recruiter: Manages candidates, jobs and interviews
    - hiring_manager: Reviews candidates and runs interviews
    - viewer: Read-only access to candidates, jobs and interviews

Usage:
    from src.domain.enums import UserRole

    if session.identity.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles for RBAC authorization.

    String Enum:
        Inherits from str for easy serialization. Values are the lowercase
        identifiers used in the permission table file and API payloads.
    """

    ADMIN = "admin"
    """Administrator with every action on every subject."""

    RECRUITER = "recruiter"
    """Recruiter running requisitions and the candidate pipeline."""

    HIRING_MANAGER = "hiring_manager"
    """Hiring manager reviewing candidates and conducting interviews."""

    VIEWER = "viewer"
    """Read-only stakeholder."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values.
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
