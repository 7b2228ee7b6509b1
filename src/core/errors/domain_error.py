"""DomainError: the error half of a Result.

Handlers return ``Failure(error=SomeDomainError(...))`` instead of raising;
the presentation layer turns the code into an HTTP status.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Expected failure of a use case. Not an Exception.

    Attributes:
        code: Reason, also used for the problem type URI.
        message: Text safe to show to the client.
        details: Extra debugging context, never sent to clients.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
