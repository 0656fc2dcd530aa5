"""
Tests for configuration loading and validation.
"""

import pytest

from chat_export.config import (
    ConfigValidator, EnvironmentLoader, ExportConfig, LogLevel, RepositoryConfig,
    ServerConfig, FILENAME_DATE_FORMAT
)
from chat_export.main import ChatExportApp

ENV_KEYS = [
    "APP_NAME", "FEED_BASE_URL", "SERVER_HOST", "SERVER_PORT", "CORS_ORIGINS",
    "LOG_LEVEL", "REPOSITORY_BACKEND", "DATABASE_PATH", "SEED_FILE", "REPOSITORY_TIMEOUT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestEnvironmentLoader:
    """Tests for EnvironmentLoader."""

    def test_defaults(self, clean_env):
        config = EnvironmentLoader.load_config(use_dotenv=False)

        assert config.app_name == "JabbR"
        assert config.base_url == "http://jabbr.net"
        assert config.server_config.port == 8080
        assert config.repository_config.backend == "memory"
        assert config.repository_config.timeout == 10.0
        assert config.log_level == LogLevel.INFO
        assert config.filename_date_format == FILENAME_DATE_FORMAT

    def test_overrides(self, clean_env):
        clean_env.setenv("APP_NAME", "Chatter")
        clean_env.setenv("FEED_BASE_URL", "https://chat.example.com")
        clean_env.setenv("SERVER_PORT", "9000")
        clean_env.setenv("CORS_ORIGINS", "https://a.example.com, https://b.example.com")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("REPOSITORY_BACKEND", "SQLite")
        clean_env.setenv("DATABASE_PATH", "/tmp/chat.db")
        clean_env.setenv("REPOSITORY_TIMEOUT", "2.5")

        config = EnvironmentLoader.load_config(use_dotenv=False)

        assert config.app_name == "Chatter"
        assert config.base_url == "https://chat.example.com"
        assert config.server_config.port == 9000
        assert config.server_config.cors_origins == ["https://a.example.com", "https://b.example.com"]
        assert config.log_level == LogLevel.DEBUG
        assert config.repository_config.backend == "sqlite"
        assert config.repository_config.database_path == "/tmp/chat.db"
        assert config.repository_config.timeout == 2.5

    def test_unknown_log_level_falls_back(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "chatty")
        assert EnvironmentLoader.load_config(use_dotenv=False).log_level == LogLevel.INFO


class TestConfigValidator:
    """Tests for ConfigValidator."""

    def test_default_config_is_valid(self):
        assert ConfigValidator.validate_config(ExportConfig()) == []

    def test_reports_each_problem(self):
        config = ExportConfig(
            app_name=" ",
            base_url="jabbr.net",
            server_config=ServerConfig(port=70000, cors_origins=["not-a-url", "*"]),
            repository_config=RepositoryConfig(backend="redis", timeout=0),
        )

        errors = ConfigValidator.validate_config(config)

        assert len(errors) == 6
        assert any("Application name" in e for e in errors)
        assert any("base URL" in e for e in errors)
        assert any("70000" in e for e in errors)
        assert any("not-a-url" in e for e in errors)
        assert any("redis" in e for e in errors)
        assert any("timeout" in e for e in errors)

    def test_app_refuses_invalid_config(self):
        app = ChatExportApp(ExportConfig(repository_config=RepositoryConfig(timeout=-1)))
        with pytest.raises(ValueError, match="Repository timeout must be positive"):
            app.initialize()

    def test_app_builds_server(self):
        app = ChatExportApp(ExportConfig())
        app.initialize()
        assert app.server is not None
        assert app.server.get_app().title == "JabbR Message Export API"
