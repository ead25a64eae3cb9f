"""Tests for dagsmith.core.logging_config module."""

import json
import logging

import pytest

from dagsmith.core.logging_config import JsonFormatter, LogConfig, configure_logging


class TestLogConfig:
    """Tests for LogConfig."""

    def test_from_env_defaults(self, monkeypatch):
        """Test defaults without environment variables."""
        for name in ("DAGSMITH_LOG_LEVEL", "DAGSMITH_LOG_FORMAT", "DAGSMITH_LOG_FILE"):
            monkeypatch.delenv(name, raising=False)

        config = LogConfig.from_env()

        assert config.level == "WARNING"
        assert config.format == "text"
        assert config.file_path is None

    def test_from_env_invalid_format(self, monkeypatch):
        """Test an unknown format is rejected."""
        monkeypatch.setenv("DAGSMITH_LOG_FORMAT", "xml")

        with pytest.raises(ValueError, match="'text' or 'json'"):
            LogConfig.from_env()

    def test_from_env_invalid_level(self, monkeypatch):
        """Test an unknown level is rejected."""
        monkeypatch.setenv("DAGSMITH_LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValueError, match="DAGSMITH_LOG_LEVEL must be one of"):
            LogConfig.from_env()

    def test_from_env_level_case_insensitive(self, monkeypatch):
        """Test a lowercase level is accepted and normalized."""
        monkeypatch.setenv("DAGSMITH_LOG_LEVEL", "debug")

        assert LogConfig.from_env().level == "DEBUG"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_package_logger(self):
        """Test level and a console handler land on the dagsmith logger."""
        logger = configure_logging(level="DEBUG")

        assert logger.name == "dagsmith"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_reconfigure_replaces_handlers(self):
        """Test calling twice does not stack handlers."""
        configure_logging(level="INFO")
        logger = configure_logging(level="ERROR")

        assert len(logger.handlers) == 1
        assert logger.level == logging.ERROR

    def test_env_level(self, monkeypatch):
        """Test DAGSMITH_LOG_LEVEL is used when no level is passed."""
        monkeypatch.setenv("DAGSMITH_LOG_LEVEL", "INFO")

        logger = configure_logging()

        assert logger.level == logging.INFO

    def test_invalid_level_argument(self, monkeypatch):
        """Test an unknown explicit level is rejected."""
        monkeypatch.delenv("DAGSMITH_LOG_LEVEL", raising=False)

        with pytest.raises(ValueError, match="level must be one of"):
            configure_logging(level="LOUD")

    def test_json_file_output(self, tmp_path, graph):
        """Test JSON records are written to the log file."""
        log_file = tmp_path / "dagsmith.log"
        configure_logging(level="INFO", format="json", file_path=str(log_file))

        graph.root("a")
        graph.export()

        for handler in logging.getLogger("dagsmith").handlers:
            handler.flush()
        lines = log_file.read_text().strip().splitlines()
        record = json.loads(lines[-1])
        assert record["level"] == "INFO"
        assert record["logger"] == "dagsmith.core.graph.graph"
        assert record["message"] == "graph 0 exported: 1 tasks"


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_extra_fields(self):
        """Test fields passed via extra= are grouped under 'extra'."""
        record = logging.LogRecord(
            name="dagsmith.test",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="node %s",
            args=("NodeId(0, 0)",),
            exc_info=None,
        )
        record.graph_id = 3

        data = json.loads(JsonFormatter().format(record))

        assert data["message"] == "node NodeId(0, 0)"
        assert data["level"] == "WARNING"
        assert data["extra"] == {"graph_id": 3}
