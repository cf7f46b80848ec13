"""Unit tests for settings loading and logging setup."""

import json
import logging
import os
import sys

import pytest

from config import LOGGER_NAME, Settings, StructuredFormatter, configure_logging, load_settings
from contract import parse_props
from models import ShapeMismatch


class TestLoadSettings:
    """Test load_settings."""

    def test_defaults(self, clean_env, tmp_path):
        settings = load_settings(tmp_path / "missing.env")

        assert settings == Settings(log_level="INFO", log_json=True)

    def test_reads_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "DYNAMIC_BUTTON_LOG_LEVEL=debug\nDYNAMIC_BUTTON_LOG_JSON=false\n"
        )

        settings = load_settings(env_file)

        assert settings.log_level == "DEBUG"
        assert settings.log_json is False

    def test_environment_overrides_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("DYNAMIC_BUTTON_LOG_LEVEL=DEBUG\n")
        clean_env.setenv("DYNAMIC_BUTTON_LOG_LEVEL", "warning")

        assert load_settings(env_file).log_level == "WARNING"

    def test_env_file_does_not_touch_environment(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("DYNAMIC_BUTTON_LOG_LEVEL=ERROR\n")

        load_settings(env_file)

        assert "DYNAMIC_BUTTON_LOG_LEVEL" not in os.environ

    def test_invalid_level(self, clean_env, tmp_path):
        clean_env.setenv("DYNAMIC_BUTTON_LOG_LEVEL", "loud")

        with pytest.raises(ValueError, match="LOG_LEVEL"):
            load_settings(tmp_path / "missing.env")

    def test_invalid_bool(self, clean_env, tmp_path):
        clean_env.setenv("DYNAMIC_BUTTON_LOG_JSON", "maybe")

        with pytest.raises(ValueError, match="LOG_JSON"):
            load_settings(tmp_path / "missing.env")

    def test_settings_are_frozen(self):
        settings = Settings()

        with pytest.raises(AttributeError):
            settings.log_level = "DEBUG"


class TestStructuredFormatter:
    """Test JSON log formatting."""

    def test_formats_extra_fields(self):
        record = logging.makeLogRecord(
            {
                "name": "dynamic_button.contract",
                "levelname": "WARNING",
                "levelno": logging.WARNING,
                "msg": "props shape mismatch",
                "variant": "link",
                "missing": ("name",),
                "unexpected": ("onClick",),
            }
        )

        data = json.loads(StructuredFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["logger"] == "dynamic_button.contract"
        assert data["message"] == "props shape mismatch"
        assert data["variant"] == "link"
        assert data["missing"] == ["name"]
        assert data["unexpected"] == ["onClick"]
        assert "exception" not in data

    def test_omits_absent_extras(self):
        record = logging.makeLogRecord({"msg": "hello"})

        data = json.loads(StructuredFormatter().format(record))

        assert set(data) == {"timestamp", "level", "logger", "message"}

    def test_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.makeLogRecord({"msg": "failed", "exc_info": sys.exc_info()})

        data = json.loads(StructuredFormatter().format(record))

        assert "ValueError: boom" in data["exception"]


class TestConfigureLogging:
    """Test configure_logging."""

    def test_installs_json_handler(self, package_logger):
        logger = configure_logging(Settings(log_level="DEBUG", log_json=True))

        assert logger is package_logger
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_plain_formatter(self, package_logger):
        logger = configure_logging(Settings(log_json=False))

        assert not isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_idempotent(self, package_logger):
        configure_logging(Settings())
        configure_logging(Settings())

        assert len(package_logger.handlers) == 1

    def test_reads_settings_when_omitted(self, package_logger, clean_env):
        clean_env.setenv("DYNAMIC_BUTTON_LOG_LEVEL", "ERROR")

        logger = configure_logging()

        assert logger.level == logging.ERROR

    def test_contract_records_reach_handler(self, package_logger, capsys):
        configure_logging(Settings(log_level="WARNING", log_json=True))

        with pytest.raises(ShapeMismatch):
            parse_props({})

        line = capsys.readouterr().err.strip().splitlines()[-1]
        data = json.loads(line)
        assert data["logger"] == "dynamic_button.contract"
        assert data["missing"] == ["onClick"]
