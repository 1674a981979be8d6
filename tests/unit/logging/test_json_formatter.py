"""Unit tests for the log formatters."""

import json
import logging
import sys

from smartencode.logging.context import FileContextFilter, file_context
from smartencode.logging.handlers import (
    JSONFormatter,
    TextFormatter,
    decision_fields,
)


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="smartencode.workflow.processor",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg="Skipping: %s",
        args=("Skipping short video (42.0s < 1 minute)",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestDecisionFields:
    """Tests for decision_fields."""

    def test_only_known_fields_in_order(self) -> None:
        record = make_record(quality=21, tier="animation", unrelated="x")
        assert list(decision_fields(record).items()) == [
            ("tier", "animation"),
            ("quality", 21),
        ]

    def test_plain_record_has_none(self) -> None:
        assert decision_fields(make_record()) == {}

    def test_false_values_are_kept(self) -> None:
        """process_file=False is a decision, not a missing field."""
        assert decision_fields(make_record(process_file=False)) == {
            "process_file": False
        }


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_basic_fields(self) -> None:
        entry = json.loads(JSONFormatter().format(make_record()))

        assert entry["level"] == "INFO"
        assert entry["message"] == "Skipping: Skipping short video (42.0s < 1 minute)"
        assert entry["logger"] == "smartencode.workflow.processor"
        assert "timestamp" in entry
        assert "decision" not in entry
        assert "file" not in entry

    def test_decision_fields_nested(self) -> None:
        record = make_record(process_file=False, reason_type="too_short")

        entry = json.loads(JSONFormatter().format(record))

        assert entry["decision"] == {"process_file": False, "reason_type": "too_short"}

    def test_file_from_filter(self) -> None:
        record = make_record()
        with file_context("/media/movie.mkv"):
            FileContextFilter().filter(record)

        entry = json.loads(JSONFormatter().format(record))

        assert entry["file"] == "/media/movie.mkv"

    def test_exception_included(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = make_record(exc_info=sys.exc_info())

        entry = json.loads(JSONFormatter().format(record))

        assert "RuntimeError: boom" in entry["exception"]


class TestTextFormatter:
    """Tests for TextFormatter."""

    def test_file_name_prefix_and_decision_pairs(self) -> None:
        record = make_record(
            media_file="/media/movies/clip.mkv",
            process_file=False,
            reason_type="too_short",
        )

        line = TextFormatter().format(record)

        assert " INFO smartencode.workflow.processor: [clip.mkv] Skipping: " in line
        assert line.endswith("(process_file=False reason_type=too_short)")

    def test_plain_record(self) -> None:
        line = TextFormatter().format(make_record(media_file=None))

        assert line.endswith(": Skipping: Skipping short video (42.0s < 1 minute)")
        assert "[" not in line
