# mypy: disable-error-code="arg-type"
"""Event bus factory and subscriptions.

Every class in SESSION_EVENTS is routed to the LoggingEventHandler method
named after it (UserLoginFailed -> handle_user_login_failed). Adding an event
without its handler method fails at startup, not at publish time.
"""

import re
from functools import lru_cache
from typing import TYPE_CHECKING

from src.domain.events.session_events import (
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserLogoutFailed,
    UserLogoutSucceeded,
)

if TYPE_CHECKING:
    from src.domain.events.base_event import DomainEvent
    from src.domain.protocols.event_bus_protocol import EventBusProtocol

SESSION_EVENTS: tuple[type["DomainEvent"], ...] = (
    UserLoginAttempted,
    UserLoginSucceeded,
    UserLoginFailed,
    UserLogoutSucceeded,
    UserLogoutFailed,
)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def handler_method_name(event_class: type["DomainEvent"]) -> str:
    """Name of the handler method for an event class.

    Example:
        >>> handler_method_name(UserLoginSucceeded)
        'handle_user_login_succeeded'
    """
    return "handle_" + _CAMEL_BOUNDARY.sub("_", event_class.__name__).lower()


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Application-wide event bus with the logging subscriptions in place.

    Raises:
        RuntimeError: If LoggingEventHandler lacks a method for an event in
            SESSION_EVENTS.
    """
    from src.core.container.infrastructure import get_logger
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    logger = get_logger()
    bus = InMemoryEventBus(logger=logger)
    subscriber = LoggingEventHandler(logger=logger)

    for event_class in SESSION_EVENTS:
        method_name = handler_method_name(event_class)
        method = getattr(subscriber, method_name, None)
        if method is None:
            raise RuntimeError(
                f"LoggingEventHandler has no {method_name} for {event_class.__name__}"
            )
        bus.subscribe(event_class, method)

    return bus
