"""API v1 routers.

RESTful resource-based endpoints. All endpoints use resource nouns, not
action verbs.

Resources:
    /api/v1/sessions       - Session management (login/logout)
    /api/v1/permissions    - Permission checks for the current session
    /api/v1/navigation     - Navigation visible to the current session
    /api/v1/roles          - Permission table (audit)
    /api/v1/users          - User directory (user management)
"""

from fastapi import APIRouter

from src.presentation.routers.api.v1 import (
    navigation,
    permissions,
    roles,
    sessions,
    users,
)


def build_v1_router(prefix: str) -> APIRouter:
    """Assemble every v1 resource router under `prefix`."""
    v1_router = APIRouter(prefix=prefix)
    v1_router.include_router(sessions.router)
    v1_router.include_router(permissions.router)
    v1_router.include_router(navigation.router)
    v1_router.include_router(roles.router)
    v1_router.include_router(users.router)
    return v1_router


__all__ = [
    "build_v1_router",
]
