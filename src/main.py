"""ASGI entry point: ``uvicorn src.main:app``."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import (
    get_event_bus,
    get_logger,
    get_permission_table,
    get_user_repository,
)
from src.presentation.routers import page_router, system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import build_v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the singletons before serving.

    A malformed permission table file raises here, so the process refuses
    to start instead of serving with the wrong grants.
    """
    logger = get_logger()
    table = get_permission_table()
    get_event_bus()
    get_user_repository()

    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
        roles=len(table),
    )
    yield
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Role-based access control for the applicant tracking system",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(TraceMiddleware)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(build_v1_router(settings.api_v1_prefix))
app.include_router(page_router)
