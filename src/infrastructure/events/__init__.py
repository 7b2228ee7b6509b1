"""Event bus implementation. Subscribers live in ``handlers/``."""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
