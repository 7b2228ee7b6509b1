"""Permission components for RBAC authorization.

This module defines the Action and Subject enums that form a permission.
Permissions are expressed as (action, subject) pairs, e.g. (read, candidates).

Usage:
    from src.domain.enums import Action, Subject

    allowed = has_permission(session, Action.UPDATE, Subject.CANDIDATES)

    # FastAPI dependency
    @router.get("/roles")
    async def list_roles(
        _: None = Depends(require_all_permissions(
            Permission(Action.READ, Subject.USERS),
        )),
    ):
        ...
"""

from enum import Enum


class Action(str, Enum):
    """Operations that can be performed on a subject.

    Action Semantics:
        CREATE: Add new records (new candidate, new job, bulk import)
        READ: View, list and export
        UPDATE: Edit existing records, change pipeline stage
        DELETE: Remove records
    """

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings.

        Returns:
            list[str]: List of action values.
        """
        return [action.value for action in cls]


class Subject(str, Enum):
    """Protected resource categories of the ATS.

    Subject Categories:
        Recruiting:
            - CANDIDATES: Applicant records and their pipeline stage
            - JOBS: Job requisitions
            - INTERVIEWS: Interview schedule and feedback
            - PIPELINE_LEVELS: Hiring pipeline stage definitions
            - REPORTS: Dashboards and recruiting reports

        Administration:
            - USERS: User accounts
            - ROLES: Role definitions
            - SETTINGS: Application settings
    """

    # Administration
    USERS = "users"
    ROLES = "roles"

    # Recruiting
    CANDIDATES = "candidates"
    JOBS = "jobs"
    INTERVIEWS = "interviews"
    REPORTS = "reports"
    PIPELINE_LEVELS = "pipeline_levels"

    SETTINGS = "settings"

    @classmethod
    def values(cls) -> list[str]:
        """Get all subject values as strings.

        Returns:
            list[str]: List of subject values.
        """
        return [subject.value for subject in cls]
