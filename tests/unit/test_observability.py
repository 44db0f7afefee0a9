"""Tests for observability/logger.py and observability/metrics.py"""
import io
import json
import logging
import sys

from mdnotion.observability import MetricsHook, NoopMetricsHook, StructuredFormatter, get_logger


def _record(msg, level=logging.INFO, exc_info=None, extra_fields=None):
    record = logging.LogRecord(
        name="mdnotion.test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    if extra_fields is not None:
        record.extra_fields = extra_fields
    return record


class TestStructuredFormatter:
    def test_basic_format(self):
        result = json.loads(StructuredFormatter().format(_record("hello world")))
        assert result["message"] == "hello world"
        assert result["level"] == "INFO"
        assert result["logger"] == "mdnotion.test"
        assert "ts" in result

    def test_extra_fields_merged(self):
        record = _record("page created", extra_fields={"page_id": "abc", "batches": 3})
        result = json.loads(StructuredFormatter().format(record))
        assert result["page_id"] == "abc"
        assert result["batches"] == 3

    def test_exception_info_included(self):
        try:
            raise ValueError("test error")
        except ValueError:
            exc_info = sys.exc_info()
        result = json.loads(StructuredFormatter().format(_record("boom", exc_info=exc_info)))
        assert "ValueError: test error" in result["exception"]

    def test_non_serializable_extra_uses_str(self):
        record = _record("msg", extra_fields={"obj": object()})
        result = json.loads(StructuredFormatter().format(record))
        assert result["obj"].startswith("<object object")


class TestGetLogger:
    def test_returns_logger_with_handler(self):
        logger = get_logger("mdnotion.test_handler")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
        assert logger.propagate is False

    def test_string_level(self):
        logger = get_logger("mdnotion.test_level", level="debug")
        assert logger.level == logging.DEBUG

    def test_idempotent_no_duplicate_handlers(self):
        first = get_logger("mdnotion.test_idempotent")
        second = get_logger("mdnotion.test_idempotent")
        assert first is second
        assert len(second.handlers) == 1

    def test_custom_stream(self):
        stream = io.StringIO()
        logger = get_logger("mdnotion.test_stream", stream=stream)
        logger.info("uploaded", extra={"extra_fields": {"blocks": 7}})
        line = json.loads(stream.getvalue())
        assert line["message"] == "uploaded"
        assert line["blocks"] == 7


class TestMetricsHook:
    def test_noop_satisfies_protocol(self):
        assert isinstance(NoopMetricsHook(), MetricsHook)

    def test_noop_returns_none(self):
        hook = NoopMetricsHook()
        assert hook.increment("mdnotion.requests_total", tags={"status": "200"}) is None
        assert hook.timing("mdnotion.request_duration_ms", 1.5) is None

    def test_counter_and_timing_backend_is_a_hook(self):
        class StatsBackend:
            def increment(self, name, value=1, tags=None):
                pass

            def timing(self, name, ms, tags=None):
                pass

        assert isinstance(StatsBackend(), MetricsHook)

    def test_incomplete_class_is_not_a_hook(self):
        class OnlyIncrement:
            def increment(self, name, value=1, tags=None):
                pass

        assert not isinstance(OnlyIncrement(), MetricsHook)

    def test_noop_has_slots(self):
        assert NoopMetricsHook.__slots__ == ()
