"""
Tests for lumui.core.logging_config
"""

import json
import logging

from lumui.core import JSONFormatter, get_logger, log_with_context, setup_logging
from lumui.core.logging_config import ContextFormatter, record_context


class TestSetupLogging:
    """Tests for setup_logging()"""

    def test_console_handler_and_level(self, restore_root_logger):
        setup_logging(level="DEBUG")
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_json_output(self, restore_root_logger):
        setup_logging(level="INFO", json_output=True)
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "lumui.log"
        setup_logging(level="INFO", log_file=log_file)
        get_logger("lumui.test").info("written")
        for handler in restore_root_logger.handlers:
            handler.flush()
        assert json.loads(log_file.read_text().splitlines()[-1])["message"] == "written"


class TestJSONFormatter:
    """Tests for JSONFormatter"""

    def test_context_fields(self):
        record = logging.LogRecord("lumui.x", logging.INFO, __file__, 10, "hello", None, None)
        record.extra_fields = {"pages": 2}
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["pages"] == 2


def test_log_with_context(caplog):
    logger = get_logger("lumui.context")
    with caplog.at_level(logging.INFO, logger="lumui"):
        log_with_context(logger, "info", "Showcase written", pages=2)
    assert caplog.records[-1].extra_fields == {"pages": 2}


def test_library_logger_has_null_handler():
    assert any(isinstance(h, logging.NullHandler) for h in logging.getLogger("lumui").handlers)


class TestRecordContext:
    """Tests for context carried through extra={...}"""

    def _record(self, **extra):
        record = logging.LogRecord("lumui.x", logging.INFO, __file__, 10, "rendered", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_plain_extra_in_json(self):
        data = json.loads(JSONFormatter().format(self._record(bytes=512, chart="donut")))
        assert data["bytes"] == 512
        assert data["chart"] == "donut"

    def test_standard_attributes_excluded(self):
        assert record_context(self._record()) == {}

    def test_console_appends_key_values(self):
        formatter = ContextFormatter(fmt="%(levelname)s %(message)s", use_color=False)
        assert formatter.format(self._record(path="index.html")) == "INFO rendered | path=index.html"

    def test_console_color_restores_levelname(self):
        record = self._record()
        line = ContextFormatter(fmt="%(levelname)s", use_color=True).format(record)
        assert "\033[32m" in line
        assert record.levelname == "INFO"
