"""Tests for LevelFilteredLogger."""

import json
import threading
from collections.abc import Callable
from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from severity_log import (
    ErrorDetail,
    LevelFilteredLogger,
    MemorySink,
    OutputSink,
    RecordRenderer,
    Severity,
    SinkWriteError,
)

ALL_LEVELS = list(Severity)

LoggerFactory = Callable[..., LevelFilteredLogger]


class TestShouldLog:
    """Test threshold comparison."""

    @pytest.mark.parametrize("threshold", ALL_LEVELS)
    @pytest.mark.parametrize("level", ALL_LEVELS)
    def test_rank_comparison(self, make_logger: LoggerFactory, level: Severity, threshold: Severity) -> None:
        """Test should_log is true iff rank(level) >= rank(threshold)."""
        logger = make_logger(threshold)

        assert logger.should_log(level) is (level.rank >= threshold.rank)

    def test_accepts_level_names(self, make_logger: LoggerFactory) -> None:
        """Test string levels are accepted case-insensitively."""
        logger = make_logger("warn")

        assert logger.should_log("ERROR") is True
        assert logger.should_log("warning") is True
        assert logger.should_log("info") is False

    def test_unrecognized_level_ranks_lowest(self, make_logger: LoggerFactory) -> None:
        """Test unknown levels pass only a debug threshold."""
        assert make_logger(Severity.INFO).should_log("verbose") is False
        assert make_logger(Severity.DEBUG).should_log("verbose") is True

    def test_has_no_side_effects(self, make_logger: LoggerFactory, memory_sink: MemorySink) -> None:
        """Test should_log never writes."""
        logger = make_logger(Severity.DEBUG)

        logger.should_log(Severity.ERROR)

        assert len(memory_sink) == 0


class TestThreshold:
    """Test threshold configuration."""

    def test_default_threshold_is_info(self, memory_sink: MemorySink) -> None:
        """Test info is the default threshold."""
        assert LevelFilteredLogger(sink=memory_sink).threshold is Severity.INFO

    def test_unrecognized_threshold_falls_back_to_info(self, memory_sink: MemorySink) -> None:
        """Test unknown thresholds fall back to info."""
        assert LevelFilteredLogger("loud", sink=memory_sink).threshold is Severity.INFO

    def test_threshold_is_read_only(self, make_logger: LoggerFactory) -> None:
        """Test threshold cannot be reassigned on an instance."""
        logger = make_logger(Severity.WARN)

        with pytest.raises(AttributeError):
            logger.threshold = Severity.DEBUG  # type: ignore[misc]

    def test_new_instance_changes_filtering(
        self, make_logger: LoggerFactory, memory_sink: MemorySink
    ) -> None:
        """Test a new threshold affects only the new instance."""
        first = make_logger(Severity.ERROR)
        second = first.with_threshold(Severity.DEBUG)

        first.info("dropped")
        second.info("kept")

        assert first.threshold is Severity.ERROR
        assert second.threshold is Severity.DEBUG
        assert [record["message"] for record in memory_sink.records()] == ["kept"]

    def test_with_threshold_shares_sink_and_renderer(self, make_logger: LoggerFactory) -> None:
        """Test replacement loggers keep the same collaborators."""
        logger = make_logger(Severity.INFO)
        replacement = logger.with_threshold("error")

        assert replacement is not logger
        assert replacement.sink is logger.sink
        assert replacement.renderer is logger.renderer


class TestLog:
    """Test filtering and emission."""

    def test_warn_threshold_filters_lower_levels(
        self, make_logger: LoggerFactory, memory_sink: MemorySink
    ) -> None:
        """Test debug and info are dropped while warn and error are written once each."""
        logger = make_logger("warn")

        logger.debug("x")
        logger.info("x")
        assert len(memory_sink) == 0

        logger.warn("x")
        assert len(memory_sink) == 1

        logger.error("x")
        assert len(memory_sink) == 2

    def test_filtered_call_does_not_touch_clock_or_sink(self) -> None:
        """Test no record is built for filtered calls."""
        sink = MagicMock(spec=OutputSink)
        clock = MagicMock()
        logger = LevelFilteredLogger(Severity.ERROR, sink=sink, clock=clock)

        logger.info("dropped")

        clock.assert_not_called()
        sink.write.assert_not_called()

    def test_exactly_one_write_per_emitted_call(self) -> None:
        """Test the sink receives a single write."""
        sink = MagicMock(spec=OutputSink)
        logger = LevelFilteredLogger(Severity.DEBUG, sink=sink)

        logger.debug("one")

        sink.write.assert_called_once()

    def test_record_fields(self, make_logger: LoggerFactory, memory_sink: MemorySink) -> None:
        """Test emitted JSON fields."""
        logger = make_logger("info")

        logger.info("ok")

        assert memory_sink.records() == [
            {"timestamp": "2025-08-26T10:00:00+00:00", "level": "info", "message": "ok"},
        ]

    def test_no_error_means_no_error_field(
        self, make_logger: LoggerFactory, memory_sink: MemorySink
    ) -> None:
        """Test records without an error never contain a spurious error object."""
        make_logger().info("ok")

        record = memory_sink.records()[0]
        assert record.get("error") is None

    def test_error_mapping_is_serialized(
        self, make_logger: LoggerFactory, memory_sink: MemorySink
    ) -> None:
        """Test error details from a mapping."""
        logger = make_logger("error")

        logger.error("failed", {"message": "boom", "stack": "at handler (app.js:10)"})

        record = memory_sink.records()[0]
        assert record["level"] == "error"
        assert record["message"] == "failed"
        assert record["error"] == {"message": "boom", "stack": "at handler (app.js:10)"}

    def test_exception_is_serialized(self, make_logger: LoggerFactory, memory_sink: MemorySink) -> None:
        """Test exceptions become message and traceback text."""
        logger = make_logger("error")

        try:
            raise KeyError("missing")
        except KeyError as e:
            logger.error("lookup failed", e)

        error = memory_sink.records()[0]["error"]
        assert error["message"] == "'missing'"
        assert "KeyError: 'missing'" in error["stack"]

    def test_error_detail_passes_through(
        self, make_logger: LoggerFactory, memory_sink: MemorySink
    ) -> None:
        """Test stack text is passed through untouched."""
        logger = make_logger("debug")

        logger.warn("odd", ErrorDetail("boom", "line 1\n\tline 2"))

        assert memory_sink.records()[0]["error"]["stack"] == "line 1\n\tline 2"

    def test_unrecognized_level_is_emitted_as_debug(
        self, make_logger: LoggerFactory, memory_sink: MemorySink
    ) -> None:
        """Test unknown levels are filtered above debug and recorded as debug otherwise."""
        make_logger("info").log("verbose", "dropped")
        assert len(memory_sink) == 0

        make_logger("debug").log("verbose", "kept")
        assert memory_sink.records()[0]["level"] == "debug"

    def test_warning_alias(self, make_logger: LoggerFactory, memory_sink: MemorySink) -> None:
        """Test warning is an alias for warn."""
        logger = make_logger("warn")

        logger.warning("careful")
        logger.log("WARNING", "careful")

        assert [record["level"] for record in memory_sink.records()] == ["warn", "warn"]

    def test_identical_calls_produce_identical_records(
        self, make_logger: LoggerFactory, memory_sink: MemorySink
    ) -> None:
        """Test no hidden state affects output."""
        logger = make_logger("debug")

        logger.log(Severity.ERROR, "same", {"message": "boom", "stack": "s"})
        logger.log(Severity.ERROR, "same", {"message": "boom", "stack": "s"})

        first, second = memory_sink.lines
        assert first == second

    @pytest.mark.usefixtures("frozen_time")
    def test_default_clock_uses_current_utc_time(self, memory_sink: MemorySink) -> None:
        """Test the default timestamp source."""
        LevelFilteredLogger("info", sink=memory_sink).info("now")

        assert memory_sink.records()[0]["timestamp"] == "2025-08-26T10:00:00+00:00"

    def test_text_renderer(self, memory_sink: MemorySink, fixed_clock: Callable[[], datetime]) -> None:
        """Test the logger uses its renderer."""
        logger = LevelFilteredLogger("info", sink=memory_sink, renderer=RecordRenderer("text"), clock=fixed_clock)

        logger.info("ok")

        assert memory_sink.lines == ["2025-08-26T10:00:00+00:00 | INFO | ok"]

    def test_sink_errors_propagate(self) -> None:
        """Test sink failures are not swallowed by the logger."""
        sink = MagicMock(spec=OutputSink)
        sink.write.side_effect = SinkWriteError("disk full")
        logger = LevelFilteredLogger("info", sink=sink)

        with pytest.raises(SinkWriteError):
            logger.error("failed")

    def test_message_is_stringified(self, make_logger: LoggerFactory, memory_sink: MemorySink) -> None:
        """Test non-string messages are converted."""
        make_logger().info(42)  # type: ignore[arg-type]

        assert memory_sink.records()[0]["message"] == "42"


class TestConcurrentLogging:
    """Test concurrent emission."""

    def test_concurrent_callers_write_whole_records(self, memory_sink: MemorySink) -> None:
        """Test each record arrives intact under concurrent calls."""
        logger = LevelFilteredLogger("info", sink=memory_sink, clock=lambda: datetime(2025, 1, 1, tzinfo=UTC))

        def worker(worker_id: int) -> None:
            for i in range(50):
                logger.info(f"worker-{worker_id}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        records = [json.loads(line) for line in memory_sink.lines]
        assert len(records) == 400
        assert len({record["message"] for record in records}) == 400
