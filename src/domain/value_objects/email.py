"""Login email value object."""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Syntactically valid, lowercased email address.

    The directory keys users by this form, so "Recruiter@Example.com" and
    "recruiter@example.com" are the same login.

    Raises:
        ValueError: If the address is malformed.

    Example:
        >>> Email("Recruiter@Example.com").value
        'recruiter@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        try:
            result = validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        object.__setattr__(self, "value", result.normalized.lower())

    def __str__(self) -> str:
        return self.value
