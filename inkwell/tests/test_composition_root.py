"""Integration tests for the composition root.

These tests verify that configuration loads and validates, and that the
CLI handler built from it drives the services end to end.
"""

import os
from unittest.mock import patch

import pytest

from inkwell.adapters.cli.commands import CLICommandHandler
from inkwell.config import Settings, load_settings
from inkwell.main import _execute_cli_command, build_cli_handler


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self) -> None:
        settings = load_settings()
        assert settings.notification_backend == "stdout"
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"
        assert settings.seed_users == []

    def test_load_settings_from_env(self) -> None:
        with patch.dict(
            os.environ,
            {
                "NOTIFICATION_BACKEND": "none",
                "LOG_LEVEL": "DEBUG",
                "SEED_USERS": '["Ada:ada@x.com"]',
            },
        ):
            settings = load_settings()
            assert settings.notification_backend == "none"
            assert settings.log_level == "DEBUG"
            assert settings.seed_users == ["Ada:ada@x.com"]

    def test_load_settings_validates_seed_users(self) -> None:
        with patch.dict(os.environ, {"SEED_USERS": '["no-separator"]'}):
            with pytest.raises(Exception):  # ValidationError
                load_settings()

    def test_load_settings_rejects_unknown_backend(self) -> None:
        with patch.dict(os.environ, {"NOTIFICATION_BACKEND": "carrier-pigeon"}):
            with pytest.raises(Exception):  # ValidationError
                load_settings()


@pytest.fixture
def handler() -> CLICommandHandler:
    return build_cli_handler(
        Settings(notification_backend="none", seed_users=["Ada:ada@x.com"])
    )


class TestCLICommands:
    """End-to-end command flows through the wired services."""

    @pytest.mark.asyncio
    async def test_seeded_users_are_listed(self, handler: CLICommandHandler) -> None:
        result = await _execute_cli_command(handler, "list-users", {})
        assert result["count"] == 1
        assert result["data"][0]["email"] == "ada@x.com"

    @pytest.mark.asyncio
    async def test_publish_then_list(self, handler: CLICommandHandler) -> None:
        published = await _execute_cli_command(
            handler,
            "publish",
            {"author_id": "author-123", "title": "My First Article", "content": "..."},
        )
        assert published["status"] == "success"

        listed = await _execute_cli_command(handler, "list-articles", {})
        assert listed["count"] == 1
        assert listed["data"][0]["id"] == published["data"]["id"]

    @pytest.mark.asyncio
    async def test_publish_with_empty_title_reports_error(
        self, handler: CLICommandHandler
    ) -> None:
        result = await _execute_cli_command(
            handler, "publish", {"author_id": "a", "title": "", "content": "c"}
        )
        assert result["status"] == "error"
        assert result["message"] == "Title cannot be empty"

    @pytest.mark.asyncio
    async def test_register_update_and_comment(self, handler: CLICommandHandler) -> None:
        registered = await _execute_cli_command(
            handler, "register", {"name": "Grace", "email": "grace@x.com"}
        )
        user_id = registered["data"]["id"]

        updated = await _execute_cli_command(
            handler, "update-email", {"user_id": user_id, "email": "grace@y.com"}
        )
        assert updated["data"]["email"] == "grace@y.com"

        published = await _execute_cli_command(
            handler, "publish", {"author_id": user_id, "title": "T", "content": "C"}
        )
        commented = await _execute_cli_command(
            handler,
            "comment",
            {"article_id": published["data"]["id"], "user_id": user_id, "content": "Hi"},
        )
        assert commented["status"] == "success"

    @pytest.mark.asyncio
    async def test_update_unknown_user_reports_error(
        self, handler: CLICommandHandler
    ) -> None:
        result = await _execute_cli_command(
            handler, "update-email", {"user_id": "ghost", "email": "g@x.com"}
        )
        assert result["status"] == "error"
        assert "not found" in result["message"]

    @pytest.mark.asyncio
    async def test_missing_parameter_raises(self, handler: CLICommandHandler) -> None:
        with pytest.raises(ValueError, match="Missing required parameter: title"):
            await _execute_cli_command(
                handler, "publish", {"author_id": "a", "content": "c"}
            )

    @pytest.mark.asyncio
    async def test_unknown_command_raises(self, handler: CLICommandHandler) -> None:
        with pytest.raises(ValueError, match="Unknown command"):
            await _execute_cli_command(handler, "frobnicate", {})

    @pytest.mark.asyncio
    async def test_stdout_backend_prints_notifications(self, capsys) -> None:
        handler = build_cli_handler(
            Settings(notification_backend="stdout", service_logger_name="")
        )

        await _execute_cli_command(
            handler, "register", {"name": "Grace", "email": "grace@x.com"}
        )

        assert "Welcome aboard! Your account uses grace@x.com." in capsys.readouterr().out
