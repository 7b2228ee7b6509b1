"""Port for publishing session lifecycle events.

Publishers (the login and logout handlers) only see this protocol; the
container supplies InMemoryEventBus.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Routes each event to the handlers subscribed to its exact class.

    A failing handler must neither stop the others nor reach the publisher.
    """

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None: ...

    def handler_count(self, event_type: type[DomainEvent]) -> int: ...

    async def publish(self, event: DomainEvent) -> None:
        """Await every subscriber of ``type(event)``."""
        ...
