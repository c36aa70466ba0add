"""Tests for structlog setup"""

import logging

import structlog
from structlog.testing import capture_logs

from core.logging_config import configure_logging, get_logger
from core.schema import Inputs
from core.table import tax_table


class TestLoggingConfig:

    def teardown_method(self):
        structlog.reset_defaults()

    def test_configure_sets_root_level(self):
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(level="nonsense")
        assert logging.getLogger().level == logging.INFO

    def test_get_logger_emits_events(self):
        with capture_logs() as logs:
            get_logger("flattax.test").info("hello", rows=3)
        assert logs == [{"event": "hello", "rows": 3, "log_level": "info"}]

    def test_tax_table_logs_summary(self):
        with capture_logs() as logs:
            tax_table(Inputs(incomes=[100.0, 1000.0]))
        assert len(logs) == 1
        assert logs[0]["event"] == "tax_table_built"
        assert logs[0]["rows"] == 2
        assert logs[0]["total_tax"] == 165.0
