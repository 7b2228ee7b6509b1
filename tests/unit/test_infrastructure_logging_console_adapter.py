"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods delegate to structlog
- Error details extracted from exceptions
- Context binding
"""

from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter, _level_number


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_info_logs_message_with_context(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.info("route_guard_denied", path="/users", role="viewer")

            mock_logger.info.assert_called_once_with(
                "route_guard_denied",
                path="/users",
                role="viewer",
            )

    def test_warning_logs_message_with_context(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter(use_json=True)
            adapter.warning("user_login_failed", reason="invalid_credentials")

            mock_logger.warning.assert_called_once_with(
                "user_login_failed",
                reason="invalid_credentials",
            )

    def test_error_extracts_exception_details(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("unhandled_exception", error=RuntimeError("boom"), path="/")

            mock_logger.error.assert_called_once_with(
                "unhandled_exception",
                path="/",
                error_type="RuntimeError",
                error_message="boom",
            )

    def test_bind_returns_new_adapter(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(user_id="123")
            bound.debug("lookup")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(user_id="123")
            bound_logger.debug.assert_called_once_with("lookup")


@pytest.mark.unit
class TestLevelNumber:
    """Test level name parsing."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("debug", 10), ("INFO", 20), ("Warning", 30), ("nonsense", 20)],
    )
    def test_level_number(self, name, expected):
        assert _level_number(name) == expected
