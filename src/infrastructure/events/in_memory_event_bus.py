"""Process-local event bus.

Subscribers are keyed by the exact event class. Publishing awaits every
subscriber concurrently; a subscriber that raises is reported as a warning
and never fails the login or logout that published the event.
"""

import asyncio
from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class InMemoryEventBus:
    """EventBusProtocol backed by a dict of subscriber lists.

    Usage:
        >>> bus = InMemoryEventBus(logger=get_logger())
        >>> bus.subscribe(UserLoginFailed, handler.handle_user_login_failed)
        >>> await bus.publish(UserLoginFailed(email=email, reason="invalid_credentials"))
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self._subscribers: defaultdict[type[DomainEvent], list[EventHandler]] = defaultdict(
            list
        )

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Call `handler` for every published instance of exactly `event_type`."""
        self._subscribers[event_type].append(handler)

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        return len(self._subscribers.get(event_type, ()))

    async def publish(self, event: DomainEvent) -> None:
        """Deliver `event` to its subscribers; a no-op when there are none."""
        subscribers = list(self._subscribers.get(type(event), ()))
        if not subscribers:
            return

        event_name = type(event).__name__
        self._logger.debug(
            "event_publishing",
            event_type=event_name,
            event_id=str(event.event_id),
            handler_count=len(subscribers),
        )

        outcomes = await asyncio.gather(
            *(subscriber(event) for subscriber in subscribers),
            return_exceptions=True,
        )
        for subscriber, outcome in zip(subscribers, outcomes, strict=True):
            if isinstance(outcome, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_name,
                    event_id=str(event.event_id),
                    handler_name=_handler_name(subscriber),
                    error_type=type(outcome).__name__,
                    error_message=str(outcome),
                )
