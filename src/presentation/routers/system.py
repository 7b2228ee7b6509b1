"""Unversioned operational endpoints: liveness and (in development) config."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.core.config import settings

system_router = APIRouter(tags=["System"])


@system_router.get("/health", summary="Liveness probe")
async def health() -> dict[str, str]:
    return {"status": "healthy", "version": settings.app_version}


@system_router.get("/config", summary="Effective configuration (development only)")
async def get_config() -> JSONResponse:
    """Show the non-secret settings that shape routing and sessions.

    Outside development this answers 403 so deployments do not advertise
    their layout. The demo password is never included.
    """
    if not settings.is_development:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "v1_prefix": settings.api_v1_prefix,
            },
            "pages": {
                "login": settings.login_path,
                "unauthorized": settings.unauthorized_path,
            },
            "session_cookie": {
                "name": settings.session_cookie_name,
                "secure": settings.session_cookie_secure,
            },
            "permission_table": settings.permission_table_path or "<built-in>",
            "demo_users": settings.seed_demo_users,
        }
    )
