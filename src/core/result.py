"""Success / Failure result values.

Login, logout and the permission queries return one of these instead of
raising, and routers pattern-match on them:

    match await handler.handle(LoginUser(email=email, password=password)):
        case Success(value=session):
            ...
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    error: E


type Result[T, E] = Success[T] | Failure[E]
