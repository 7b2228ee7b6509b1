"""Concrete DomainError kinds returned by the session handlers."""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Login refused: unknown email, wrong password or inactive account."""


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """A referenced record does not exist.

    Attributes:
        resource_type: Kind of record, e.g. "Session".
        resource_id: Identifier that was looked up. Never a raw session token.
    """

    resource_type: str
    resource_id: str
