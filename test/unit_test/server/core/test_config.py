"""Unit tests for server configuration settings model.

Tests verify that the Settings model correctly binds environment variables
from the .env.example file and that all configuration models work as expected.
"""

from pathlib import Path

import pytest

from adventureworks_lab.server.core.config import CORSConfig, LoggingConfig, Settings


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parent.parent.parent.parent.parent / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_server_host_binding(self, env_example_vars: dict[str, str], monkeypatch):
        host = env_example_vars["ADVENTUREWORKS_LAB_SERVER_HOST"]
        monkeypatch.setenv("ADVENTUREWORKS_LAB_SERVER_HOST", host)

        assert Settings().server_host == host

    def test_server_port_binding(self, env_example_vars: dict[str, str], monkeypatch):
        monkeypatch.setenv("ADVENTUREWORKS_LAB_SERVER_PORT", "9100")

        assert Settings().server_port == 9100

    def test_log_settings_binding(self, env_example_vars: dict[str, str], monkeypatch):
        monkeypatch.setenv("ADVENTUREWORKS_LAB_LOG_LEVEL", env_example_vars["ADVENTUREWORKS_LAB_LOG_LEVEL"])
        monkeypatch.setenv("ADVENTUREWORKS_LAB_LOG_FORMAT", "json")
        monkeypatch.setenv("ADVENTUREWORKS_LAB_LOG_FILE_DIR", "/var/log/adventureworks-lab")

        settings = Settings()
        assert settings.log_level.upper() == env_example_vars["ADVENTUREWORKS_LAB_LOG_LEVEL"].upper()
        assert settings.log_format == "json"
        assert settings.log_file_dir == "/var/log/adventureworks-lab"

    def test_database_url_binding(self, env_example_vars: dict[str, str], monkeypatch):
        url = env_example_vars["DATABASE_URL"]
        monkeypatch.setenv("DATABASE_URL", url)

        settings = Settings()
        assert settings.database_url == url
        assert "AdventureWorks2012" in settings.database_url

    def test_env_example_covers_every_setting(self, env_example_vars: dict[str, str]):
        aliases = {field.alias for field in Settings.model_fields.values()}

        assert aliases <= set(env_example_vars)

    def test_defaults(self, monkeypatch):
        for name in (
            "ADVENTUREWORKS_LAB_SERVER_HOST",
            "ADVENTUREWORKS_LAB_SERVER_PORT",
            "ADVENTUREWORKS_LAB_ENABLE_FILE_LOGGING",
            "DATABASE_URL",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)
        assert settings.server_host == "0.0.0.0"
        assert settings.server_port == 8000
        assert settings.enable_file_logging is True
        assert settings.database_url.startswith("mssql+aioodbc://")


class TestGroupedConfig:
    def test_cors_defaults(self):
        cors = CORSConfig()

        assert cors.origins == ["*"]
        assert cors.allow_credentials is True

    def test_cors_from_settings(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:3000"]')
        monkeypatch.setenv("CORS_ALLOW_CREDENTIALS", "false")

        cors = Settings().cors
        assert isinstance(cors, CORSConfig)
        assert cors.origins == ["http://localhost:3000"]
        assert cors.allow_credentials is False
        assert cors.allow_methods == ["*"]

    def test_logging_from_settings(self, monkeypatch):
        monkeypatch.setenv("ADVENTUREWORKS_LAB_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ADVENTUREWORKS_LAB_ENABLE_FILE_LOGGING", "false")

        logging_config = Settings().logging
        assert isinstance(logging_config, LoggingConfig)
        assert logging_config.level == "DEBUG"
        assert logging_config.enable_file is False

    def test_logging_config_by_field_name(self):
        config = LoggingConfig(level="WARNING", format="simple")

        assert config.level == "WARNING"
        assert config.format == "simple"
        assert config.file_dir == "logs"
