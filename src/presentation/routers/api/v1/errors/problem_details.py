"""RFC 9457 problem documents.

Every error leaving the API, whether from a domain Failure, an
HTTPException, request validation or an unexpected crash, is rendered by
problem_response() so clients see one shape.
"""

from http import HTTPStatus

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.core.config import settings
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id

_TITLES: dict[int, str] = {
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.UNAUTHORIZED: "Authentication Required",
    HTTPStatus.FORBIDDEN: "Access Denied",
    HTTPStatus.NOT_FOUND: "Resource Not Found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method Not Allowed",
    HTTPStatus.UNPROCESSABLE_ENTITY: "Validation Failed",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
}


class ErrorDetail(BaseModel):
    """One offending input field.

    Example:
        >>> ErrorDetail(field="subject", code="enum", message="Input should be 'users', ...")
    """

    field: str = Field(..., description="Dotted path of the field")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="What is wrong with the value")


class ProblemDetails(BaseModel):
    """RFC 9457 problem document with a trace id extension member."""

    type: str = Field(
        ...,
        description="URI identifying the kind of problem",
        examples=["http://localhost:8000/errors/forbidden"],
    )
    title: str = Field(..., description="Summary of the problem kind", examples=["Access Denied"])
    status: int = Field(..., description="HTTP status code", examples=[403])
    detail: str = Field(
        ...,
        description="Explanation of this occurrence",
        examples=["Permission denied: read:users"],
    )
    instance: str = Field(..., description="Request path", examples=["/api/v1/roles"])
    errors: list[ErrorDetail] | None = Field(None, description="Per-field errors")
    trace_id: str | None = Field(None, description="X-Trace-Id of the request")


def problem_title(status_code: int) -> str:
    """Title for a status code, falling back to the standard reason phrase."""
    if status_code in _TITLES:
        return _TITLES[status_code]
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def problem_slug(status_code: int) -> str:
    """Type URI slug for a status code ("not-found", "forbidden", ...)."""
    if status_code == HTTPStatus.UNPROCESSABLE_ENTITY:
        return "validation-failed"
    try:
        return HTTPStatus(status_code).phrase.lower().replace(" ", "-")
    except ValueError:
        return "error"


def problem_response(
    request: Request,
    status_code: int,
    detail: str,
    *,
    slug: str | None = None,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render a problem document for the current request.

    Args:
        request: Request being answered; its path becomes ``instance``.
        status_code: HTTP status.
        detail: Explanation for this occurrence.
        slug: Last segment of the ``type`` URI. Derived from the status
            when omitted.
        errors: Optional per-field errors.
        headers: Extra response headers (e.g. WWW-Authenticate).
    """
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug or problem_slug(status_code)}",
        title=problem_title(status_code),
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors or None,
        trace_id=get_trace_id(),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )
