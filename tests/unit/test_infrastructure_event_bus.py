"""Unit tests for InMemoryEventBus and event wiring."""

from unittest.mock import AsyncMock, Mock

import pytest

from src.core.container.events import SESSION_EVENTS, handler_method_name
from src.domain.events import UserLoginAttempted, UserLoginFailed
from src.infrastructure.events import InMemoryEventBus
from src.infrastructure.events.handlers import LoggingEventHandler


@pytest.mark.unit
class TestInMemoryEventBus:
    """Test subscribe/publish behavior."""

    @pytest.mark.asyncio
    async def test_publish_calls_every_subscriber(self):
        bus = InMemoryEventBus(logger=Mock())
        first, second = AsyncMock(), AsyncMock()
        bus.subscribe(UserLoginAttempted, first)
        bus.subscribe(UserLoginAttempted, second)
        event = UserLoginAttempted(email="viewer@example.com")

        await bus.publish(event)

        first.assert_awaited_once_with(event)
        second.assert_awaited_once_with(event)

    @pytest.mark.asyncio
    async def test_exact_type_match_only(self):
        bus = InMemoryEventBus(logger=Mock())
        handler = AsyncMock()
        bus.subscribe(UserLoginFailed, handler)

        await bus.publish(UserLoginAttempted(email="viewer@example.com"))

        handler.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_reach_publisher(self):
        """Test fail-open: other handlers still run and a warning is logged."""
        logger = Mock()
        bus = InMemoryEventBus(logger=logger)
        failing = AsyncMock(side_effect=RuntimeError("boom"))
        healthy = AsyncMock()
        bus.subscribe(UserLoginAttempted, failing)
        bus.subscribe(UserLoginAttempted, healthy)

        await bus.publish(UserLoginAttempted(email="viewer@example.com"))

        healthy.assert_awaited_once()
        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["error_message"] == "boom"

    def test_handler_count(self):
        bus = InMemoryEventBus(logger=Mock())
        bus.subscribe(UserLoginAttempted, AsyncMock())

        assert bus.handler_count(UserLoginAttempted) == 1
        assert bus.handler_count(UserLoginFailed) == 0


@pytest.mark.unit
class TestEventWiring:
    """Test the container's event subscription naming."""

    def test_handler_method_name(self):
        assert handler_method_name(UserLoginFailed) == "handle_user_login_failed"

    @pytest.mark.parametrize("event_class", SESSION_EVENTS)
    def test_logging_handler_covers_every_session_event(self, event_class):
        assert hasattr(LoggingEventHandler, handler_method_name(event_class))
