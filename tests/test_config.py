"""Tests for settings loading and logging setup."""

import logging

import pytest

from glyeral.config import Settings, load_settings
from glyeral.utils.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("GLYERAL_CONFIG", "LOG_LEVEL", "LOG_FILE", "GLYERAL_AUDIT_PATH", "GLYERAL_CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "nope.yaml")
        assert settings == Settings()

    def test_yaml_values(self, tmp_path):
        """Test values are read from the YAML file."""
        path = tmp_path / "glyeral.yaml"
        path.write_text(
            "log_level: debug\n"
            "audit_path: ''\n"
            "cors_origins:\n"
            "  - http://example.org\n"
        )

        settings = load_settings(path)

        assert settings.log_level == "DEBUG"
        assert settings.audit_path is None
        assert settings.cors_origins == ["http://example.org"]

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        """Test environment variables win over the file."""
        path = tmp_path / "glyeral.yaml"
        path.write_text("log_level: INFO\naudit_path: data/a.json\n")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("GLYERAL_AUDIT_PATH", "/tmp/b.json")
        monkeypatch.setenv("GLYERAL_CORS_ORIGINS", "http://a.test, http://b.test")

        settings = load_settings(path)

        assert settings.log_level == "WARNING"
        assert settings.audit_path == "/tmp/b.json"
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("log_level: error\n")
        monkeypatch.setenv("GLYERAL_CONFIG", str(path))

        assert load_settings().log_level == "ERROR"

    def test_only_consumed_settings(self):
        """Test every setting is one the API or UI actually reads."""
        assert set(Settings.model_fields) == {"log_level", "log_file", "audit_path", "cors_origins"}
        assert Settings().audit_path == "data/audit_trail.jsonl"

    def test_non_mapping_file_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ValueError):
            load_settings(path)


class TestLogging:
    """Tests for logging setup."""

    def test_setup_logging_is_idempotent(self, tmp_path):
        """Test repeated setup does not stack handlers."""
        log_file = tmp_path / "logs" / "glyeral.log"
        setup_logging(level="DEBUG", log_file=str(log_file))
        logger = setup_logging(level="DEBUG", log_file=str(log_file))

        assert logger.name == "glyeral"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        get_logger("tests").info("hello from tests")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from tests" in log_file.read_text()

        setup_logging(level="INFO")

    def test_get_logger_namespace(self):
        assert get_logger().name == "glyeral"
        assert get_logger("engine").name == "glyeral.engine"

    def test_api_loggers_share_namespace(self):
        """Test API modules log under glyeral so setup_logging handlers apply."""
        from api import state
        from api.routes import decisions

        assert state.logger.name == "glyeral.api.state"
        assert decisions.logger.name == "glyeral.api.decisions"
