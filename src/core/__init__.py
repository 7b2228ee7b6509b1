"""Shared kernel: settings, Result types, domain errors and the container.

Nothing here imports from the presentation layer.
"""

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
]
