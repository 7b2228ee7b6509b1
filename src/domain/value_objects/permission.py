"""Permission value object.

Immutable (action, subject) pair. Two permissions are equal when both
components are equal, so permissions can be stored in sets and used as
dictionary keys.
"""

from dataclasses import dataclass

from src.domain.enums import Action, Subject


@dataclass(frozen=True, slots=True)
class Permission:
    """A single grant: perform `action` on `subject`.

    Attributes:
        action: Operation being granted.
        subject: Resource category the operation applies to.

    Example:
        >>> p = Permission(Action.READ, Subject.CANDIDATES)
        >>> str(p)
        'read:candidates'
        >>> p == Permission(Action.READ, Subject.CANDIDATES)
        True
    """

    action: Action
    subject: Subject

    def __post_init__(self) -> None:
        """Reject components that are not enum members.

        Raises:
            TypeError: If action or subject has the wrong type.
        """
        if not isinstance(self.action, Action):
            raise TypeError(f"action must be an Action, got {self.action!r}")
        if not isinstance(self.subject, Subject):
            raise TypeError(f"subject must be a Subject, got {self.subject!r}")

    def __str__(self) -> str:
        """Return permission as 'action:subject'."""
        return f"{self.action.value}:{self.subject.value}"

