"""Base class of the session lifecycle events.

Events are immutable records named in the past tense. Each one gets its own
id and a UTC timestamp when created; subclasses add their payload as
keyword-only fields.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Something that happened, published on the event bus.

    Attributes:
        event_id: Correlates log lines produced by different handlers.
        occurred_at: Creation time (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
