"""Application-wide exception handlers.

- PageRedirect: a page guard denied the request, answer with a redirect
- HTTPException: API guards, unknown routes, wrong methods
- RequestValidationError: malformed bodies, unknown roles/actions/subjects
- Exception: anything else, logged and answered with a bare 500
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.presentation.routers.api.middleware.authorization_dependencies import (
    PageRedirect,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    problem_response,
)

_LOCATION_ROOTS = frozenset({"body", "query", "path", "header", "cookie"})


async def page_redirect_handler(request: Request, exc: Exception) -> Response:
    """Send the browser to the login or unauthorized page (307)."""
    assert isinstance(exc, PageRedirect)
    return RedirectResponse(url=exc.location, status_code=status.HTTP_307_TEMPORARY_REDIRECT)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render an HTTPException as a problem, keeping its headers."""
    assert isinstance(exc, StarletteHTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return problem_response(
        request,
        exc.status_code,
        detail,
        headers=getattr(exc, "headers", None),
    )


def _field_errors(exc: RequestValidationError) -> list[ErrorDetail]:
    details = []
    for error in exc.errors():
        parts = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_ROOTS]
        details.append(
            ErrorDetail(
                field=".".join(parts) or "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Invalid value"),
            )
        )
    return details


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """422 problem listing every invalid field.

    Unknown enum values (role in the path, action or subject in the query)
    end up here rather than being coerced.
    """
    assert isinstance(exc, RequestValidationError)
    return problem_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "One or more request values are invalid; see 'errors'.",
        errors=_field_errors(exc),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the crash and return a 500 that reveals nothing but the trace id."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )
    return problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Unexpected server error. Quote the trace id when reporting it.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PageRedirect, page_redirect_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
