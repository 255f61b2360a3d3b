"""Tests for logging configuration."""

import json
import logging

import pytest
import structlog

from bigdecimal.config import DEFAULT_LOG_CONFIG, LogConfig, configure_logging


class TestLogConfig:
    """Tests for LogConfig."""

    def test_defaults(self):
        """Warning level, console output."""
        assert DEFAULT_LOG_CONFIG.level == "warning"
        assert DEFAULT_LOG_CONFIG.json is False

    def test_from_env(self, monkeypatch):
        """Environment variables override the defaults."""
        monkeypatch.setenv("BIGDECIMAL_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("BIGDECIMAL_LOG_JSON", "Yes")
        config = LogConfig.from_env()
        assert config.level == "debug"
        assert config.json is True

    def test_from_env_unset(self, monkeypatch):
        """Missing variables fall back to the defaults."""
        monkeypatch.delenv("BIGDECIMAL_LOG_LEVEL", raising=False)
        monkeypatch.delenv("BIGDECIMAL_LOG_JSON", raising=False)
        assert LogConfig.from_env() == DEFAULT_LOG_CONFIG

    def test_numeric_level(self):
        """Level names map to stdlib levels."""
        assert LogConfig(level="debug").numeric_level == logging.DEBUG
        assert LogConfig(level="ERROR").numeric_level == logging.ERROR

    def test_unknown_level(self):
        """Unknown level names are rejected."""
        with pytest.raises(ValueError, match="verbose"):
            LogConfig(level="verbose").numeric_level  # noqa: B018


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output_to_stderr(self, capsys):
        """JSON mode writes one JSON object per event to stderr."""
        configure_logging(LogConfig(level="info", json=True))
        structlog.get_logger().info("hello", answer=42)

        captured = capsys.readouterr()
        assert captured.out == ""
        event = json.loads(captured.err)
        assert event["event"] == "hello"
        assert event["level"] == "info"
        assert event["answer"] == 42
        assert "timestamp" in event

    def test_level_filtering(self, capsys):
        """Events below the configured level are dropped."""
        configure_logging(LogConfig(level="warning", json=True))
        logger = structlog.get_logger()
        logger.debug("hidden")
        logger.info("hidden")
        logger.warning("shown")

        lines = capsys.readouterr().err.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["shown"]
