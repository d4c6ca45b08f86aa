"""
Unit tests for FastAPI application lifespan management.

Tests verify that the application startup and shutdown events are properly
handled, including the AdventureWorks database connection check.
"""

from unittest.mock import AsyncMock, patch

from fastapi import FastAPI
from sqlalchemy.exc import OperationalError

from adventureworks_lab.server.main import lifespan


class TestLifespanStartup:
    """Test application startup lifespan events."""

    async def test_lifespan_startup_checks_database(self):
        with patch("adventureworks_lab.server.main.check_connection", new_callable=AsyncMock) as mock_check:
            async with lifespan(FastAPI()):
                mock_check.assert_awaited_once()

    async def test_lifespan_startup_logs_success(self):
        with (
            patch("adventureworks_lab.server.main.check_connection", new_callable=AsyncMock),
            patch("adventureworks_lab.server.main.logger") as mock_logger,
        ):
            async with lifespan(FastAPI()):
                pass

            calls = [call[0][0] for call in mock_logger.info.call_args_list]
            assert any("Starting up" in call for call in calls)
            assert any("reachable" in call for call in calls)

    async def test_lifespan_startup_survives_unreachable_database(self):
        with (
            patch("adventureworks_lab.server.main.check_connection", new_callable=AsyncMock) as mock_check,
            patch("adventureworks_lab.server.main.logger") as mock_logger,
        ):
            mock_check.side_effect = OperationalError("SELECT 1", {}, Exception("Login timeout expired"))

            async with lifespan(FastAPI()):
                pass

            mock_logger.error.assert_called_once()
            assert "database check failed" in mock_logger.error.call_args[0][0]
            assert mock_logger.error.call_args[1]["exc_info"] is True

    async def test_lifespan_startup_with_sqlite_database(self):
        """The test configuration points at in-memory SQLite, which is always reachable."""
        with patch("adventureworks_lab.server.main.logger") as mock_logger:
            async with lifespan(FastAPI()):
                pass

            mock_logger.error.assert_not_called()


class TestLifespanShutdown:
    """Test application shutdown lifespan events."""

    async def test_lifespan_shutdown_logs_message(self):
        with (
            patch("adventureworks_lab.server.main.check_connection", new_callable=AsyncMock),
            patch("adventureworks_lab.server.main.logger") as mock_logger,
        ):
            async with lifespan(FastAPI()):
                shutdown_logs = [c[0][0] for c in mock_logger.info.call_args_list if "Shutting down" in c[0][0]]
                assert shutdown_logs == []

            shutdown_logs = [c[0][0] for c in mock_logger.info.call_args_list if "Shutting down" in c[0][0]]
            assert len(shutdown_logs) == 1


class TestRun:
    def test_run_serves_app_with_configured_address(self):
        from adventureworks_lab.server.core.config import settings
        from adventureworks_lab.server.main import app, run

        with patch("adventureworks_lab.server.main.uvicorn.run") as mock_run:
            run()

        mock_run.assert_called_once_with(app, host=settings.server_host, port=settings.server_port, log_config=None)
