"""Subscribers wired onto the event bus by the container."""

from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler

__all__ = ["LoggingEventHandler"]
