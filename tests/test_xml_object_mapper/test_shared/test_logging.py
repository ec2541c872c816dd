"""Tests for correlation-aware logging and build metrics."""

import logging

import pytest

from xml_object_mapper.shared import BuildMetrics, CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Test structured logging helpers."""

    def test_get_logger(self) -> None:
        """Test get_logger wraps a standard logger."""
        logger = get_logger("xml_object_mapper.tests", "req-1", "tests")

        assert isinstance(logger, CorrelationLogger)
        assert logger.logger is logging.getLogger("xml_object_mapper.tests")
        assert logger.correlation_id == "req-1"
        assert logger.component == "tests"

    def test_component_defaults_to_module_name(self) -> None:
        """Test the component defaults to the last part of the logger name."""
        assert get_logger("xml_object_mapper.tree.document").component == "document"

    def test_records_carry_correlation_info(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test every record includes component, correlation ID and extras."""
        logger = get_logger("xml_object_mapper.tests", "req-2", "tests")

        with caplog.at_level(logging.DEBUG, logger="xml_object_mapper.tests"):
            logger.debug("debug message", extra={"matches": 3})
            logger.info("info message")
            logger.warning("warning message")

        assert [record.levelname for record in caplog.records] == ["DEBUG", "INFO", "WARNING"]
        assert all(record.correlation_id == "req-2" for record in caplog.records)
        assert all(record.component == "tests" for record in caplog.records)
        assert caplog.records[0].matches == 3

    def test_error_includes_exception_info(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test errors logged inside an except block carry the traceback."""
        logger = get_logger("xml_object_mapper.tests")

        with caplog.at_level(logging.ERROR, logger="xml_object_mapper.tests"):
            try:
                raise ValueError("boom")
            except ValueError:
                logger.error("failed")

        assert caplog.records[0].exc_info[0] is ValueError


class TestBuildMetrics:
    """Test build counters."""

    def test_entities_per_second(self) -> None:
        """Test the throughput is derived from time and entity count."""
        metrics = BuildMetrics(entities_created=50, processing_time_ms=100.0)

        assert metrics.entities_per_second == 500.0
        assert BuildMetrics().entities_per_second == 0.0

    def test_reset(self) -> None:
        """Test every counter returns to zero."""
        metrics = BuildMetrics(3, 2, 1, 4.5)

        metrics.reset()

        assert metrics == BuildMetrics()
