"""Tests for StructlogAdapter."""

import logging

from eden_session.core.config import Config
from eden_session.logging.port import LoggingPort
from eden_session.logging.structlog_adapter import StructlogAdapter


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"
        assert adapter.session_fields == {"session_backend": "memory"}

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"eden": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"eden": {"logging": {"format": "JSON"}}}))
        assert adapter._format == "json"

    def test_unknown_format_falls_back_to_console(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"eden": {"logging": {"format": "xml"}}}))
        assert adapter._format == "console"

    def test_configure_applies_per_module_levels(self):
        adapter = StructlogAdapter()
        config = Config({"eden": {"logging": {"level": {"root": "INFO", "eden_session.store": "warning"}}}})
        adapter.configure(config)
        assert adapter._module_levels == {"eden_session.store": "WARNING"}
        assert logging.getLogger("eden_session.store").level == logging.WARNING

    def test_configure_reads_session_fields(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"eden": {"session": {"prefix": "shop", "backend": "Redis"}}}))
        assert adapter.session_fields == {"session_backend": "redis", "session_prefix": "shop"}


class TestSessionFieldsProcessor:
    def test_adds_session_fields(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"eden": {"session": {"prefix": "shop"}}}))
        event = adapter.add_session_fields(None, "info", {"event": "session_set"})
        assert event == {"event": "session_set", "session_backend": "memory", "session_prefix": "shop"}

    def test_keeps_explicit_values(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"eden": {"session": {"prefix": "shop"}}}))
        event = adapter.add_session_fields(None, "info", {"event": "x", "session_prefix": "other"})
        assert event["session_prefix"] == "other"


class TestStructlogAdapterGetLogger:
    def test_get_logger_binds_fields(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("eden_session.test", prefix="shop")
        assert logger is not None

    def test_set_level(self):
        StructlogAdapter().set_level("eden_session.adapters", "error")
        assert logging.getLogger("eden_session.adapters").level == logging.ERROR
