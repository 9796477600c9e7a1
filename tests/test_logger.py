# ABOUTME: Tests for logging setup and formatters
# ABOUTME: Validates JSON structured output, console filtering and protocol tracing

import json
import logging

import pytest

from logger import HumanReadableFormatter, JSONFormatter, setup_logging


def make_record(level, message, **extra):
    record = logging.LogRecord("hangman", level, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test structured JSON output."""

    def test_includes_extra_fields(self):
        record = make_record(
            logging.INFO, "Guess A: 2 match(es)", event_type="guess_processed", matches=2
        )

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "Guess A: 2 match(es)"
        assert data["level"] == "INFO"
        assert data["event_type"] == "guess_processed"
        assert data["matches"] == 2
        assert "timestamp" in data
        assert "lineno" not in data


class TestHumanReadableFormatter:
    """Test console filtering."""

    def test_warnings_always_shown(self):
        record = make_record(logging.WARNING, "Could not read the solution word")
        assert HumanReadableFormatter().format(record) == "WARNING: Could not read the solution word"

    def test_protocol_traces_shown(self):
        record = make_record(logging.DEBUG, ">> NEW", event_type="protocol_send", line="NEW")
        assert HumanReadableFormatter().format(record) == ">> NEW"

    def test_other_debug_hidden(self):
        record = make_record(logging.DEBUG, "noise", event_type="something_else")
        assert HumanReadableFormatter().format(record) is None

    def test_routine_info_hidden(self):
        record = make_record(logging.INFO, "Guess A", event_type="guess_processed")
        assert HumanReadableFormatter().format(record) is None

    def test_connection_shown(self):
        record = make_record(
            logging.INFO, "Connected", event_type="channel_opened", host="localhost", port=9999
        )
        assert HumanReadableFormatter().format(record) == "Connected to localhost:9999"


class TestSetupLogging:
    """Test handler wiring."""

    def test_console_only_by_default(self, restore_hangman_logger):
        logger = setup_logging()

        assert logger.name == "hangman"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_json_file_handler(self, restore_hangman_logger, tmp_path):
        log_file = tmp_path / "session.jsonl"
        logger = setup_logging(log_level=logging.DEBUG, json_log_file=str(log_file))

        logger.info("Session ended", extra={"event_type": "session_ended", "rounds_played": 2})
        for handler in logger.handlers:
            handler.flush()

        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert entries[-1]["event_type"] == "session_ended"
        assert entries[-1]["rounds_played"] == 2

    def test_repeated_setup_does_not_stack_handlers(self, restore_hangman_logger):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1
