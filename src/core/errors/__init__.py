"""Domain error types used inside Result values."""

from src.core.errors.common_errors import AuthenticationError, NotFoundError
from src.core.errors.domain_error import DomainError

__all__ = [
    "AuthenticationError",
    "DomainError",
    "NotFoundError",
]
