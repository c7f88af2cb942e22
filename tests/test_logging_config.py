"""Tests for logging setup."""

import logging

from go_summary.logging_config import get_logger, setup_logging


class TestSetupLogging:
    def test_levels_follow_verbosity(self):
        assert setup_logging("quiet").level == logging.ERROR
        assert setup_logging("normal").level == logging.WARNING
        assert setup_logging("verbose").level == logging.DEBUG

    def test_unknown_verbosity_defaults_to_warning(self):
        assert setup_logging("chatty").level == logging.WARNING

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging("normal", log_file=str(log_file))
        get_logger("api").warning("Skipping a.go: syntax error")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Skipping a.go" in log_file.read_text()


class TestGetLogger:
    def test_prefixes_module_names(self):
        assert get_logger("scanning").name == "go_summary.scanning"

    def test_keeps_package_names(self):
        assert get_logger("go_summary.api").name == "go_summary.api"

    def test_root(self):
        assert get_logger().name == "go_summary"
