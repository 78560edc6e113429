"""Tests for logging configuration."""

import logging
import logging.handlers

from shared.logging import configure_logging, resolve_log_level


class TestResolveLogLevel:
    def test_level_by_environment(self):
        assert resolve_log_level("production") == "INFO"
        assert resolve_log_level("development") == "DEBUG"
        assert resolve_log_level("test") == "WARNING"
        assert resolve_log_level("unknown") == "INFO"

    def test_explicit_override_wins(self):
        assert resolve_log_level("production", "debug") == "DEBUG"


class TestConfigureLogging:
    def test_console_only_without_log_dir(self):
        configure_logging("test", log_dir=None)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert not any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)

    def test_rotating_files_in_log_dir(self, tmp_path):
        configure_logging("production", log_dir=str(tmp_path))
        root = logging.getLogger()
        try:
            rotating = [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
            assert len(rotating) == 2
            assert (tmp_path / "wilaya_store.log").exists()
            assert (tmp_path / "wilaya_store_error.log").exists()
        finally:
            configure_logging("test", log_dir=None)
