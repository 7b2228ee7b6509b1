"""Map domain errors to problem responses.

Route handlers match on the Result of an application handler and hand any
DomainError to ErrorResponseBuilder; the error code picks the HTTP status
and the problem type URI.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.presentation.routers.api.v1.errors.problem_details import problem_response

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ACCOUNT_INACTIVE: status.HTTP_403_FORBIDDEN,
    ErrorCode.SESSION_NOT_FOUND: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.PERMISSION_TABLE_INVALID: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ErrorResponseBuilder:
    """Problem responses for DomainError values.

    Example:
        >>> match result:
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def status_for(code: ErrorCode) -> int:
        """HTTP status for an error code; unmapped codes are server errors."""
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        """Render `error` as a problem response.

        The type URI ends in the error code value
        (``.../errors/invalid_credentials``). 401 responses include a Bearer
        challenge.
        """
        status_code = ErrorResponseBuilder.status_for(error.code)
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return problem_response(
            request,
            status_code,
            error.message,
            slug=error.code.value,
            headers=headers,
        )
