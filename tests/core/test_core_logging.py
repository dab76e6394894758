"""
Tests for enumshift.core.logging.

Tests verify:
- JSON output carries service metadata and level filtering
- Bound context appears in log lines
"""

import json

from enumshift.core.logging import LogContext, configure_logging, get_logger


def _lines(captured: str) -> list[dict]:
    return [json.loads(line) for line in captured.splitlines() if line.strip()]


class TestConfigureLogging:
    def test_json_output_to_stderr(self, capsys):
        configure_logging(level="INFO", json_format=True, service="refund-api")
        get_logger("tests").info("coercion_failed", enum="RefundMode")

        captured = capsys.readouterr()
        assert captured.out == ""
        (line,) = _lines(captured.err)
        assert line["event"] == "coercion_failed"
        assert line["enum"] == "RefundMode"
        assert line["level"] == "info"
        assert line["service.name"] == "refund-api"
        assert "timestamp" in line

    def test_level_filtering(self, capsys):
        configure_logging(level="WARNING", json_format=True)
        logger = get_logger("tests")
        logger.debug("hidden")
        logger.info("hidden")
        logger.warning("shown")

        events = [line["event"] for line in _lines(capsys.readouterr().err)]
        assert events == ["shown"]

    def test_without_timestamp(self, capsys):
        configure_logging(level="INFO", json_format=True, add_timestamp=False)
        get_logger().info("event")
        (line,) = _lines(capsys.readouterr().err)
        assert "timestamp" not in line


class TestLogContext:
    def test_context_bound_and_removed(self, capsys):
        configure_logging(level="INFO", json_format=True)
        logger = get_logger("tests")

        with LogContext(call_site="api.refund"):
            logger.info("inside")
        logger.info("outside")

        inside, outside = _lines(capsys.readouterr().err)
        assert inside["call_site"] == "api.refund"
        assert "call_site" not in outside


class TestGetLogger:
    def test_named_logger_created_before_configuration(self, capsys):
        logger = get_logger("enumshift.core.valueset")
        configure_logging(level="INFO", json_format=True)
        logger.info("value_set_registered", enum="RefundMode")

        (line,) = _lines(capsys.readouterr().err)
        assert line["event"] == "value_set_registered"
        assert line["enum"] == "RefundMode"

    def test_package_import_creates_module_loggers(self):
        import enumshift
        from enumshift.core import callsite, dispatch, valueset

        assert enumshift.__version__
        for module in (callsite, dispatch, valueset):
            assert module.logger is not None
