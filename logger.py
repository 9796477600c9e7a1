import json
import logging
from datetime import datetime
from typing import Optional


class JSONFormatter(logging.Formatter):
    """Custom formatter that outputs log records as JSON objects."""

    def format(self, record):
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }

        # Add any extra attributes that were passed via extra={}
        # This excludes standard logging attributes
        standard_attrs = {
            "name",
            "msg",
            "args",
            "levelname",
            "levelno",
            "pathname",
            "filename",
            "module",
            "lineno",
            "funcName",
            "created",
            "msecs",
            "relativeCreated",
            "thread",
            "threadName",
            "processName",
            "process",
            "taskName",
            "message",
            "exc_info",
            "exc_text",
            "stack_info",
            "getMessage",
        }

        for attr_name, attr_value in record.__dict__.items():
            if attr_name not in standard_attrs and not attr_name.startswith("_"):
                log_data[attr_name] = attr_value

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Console formatter for the hangman client.

    The interaction port already prints the game itself, so most records
    are suppressed here. Returning None tells the filtering handlers to
    skip the record.
    """

    PROTOCOL_EVENTS = {"protocol_send", "protocol_recv"}

    def format(self, record):
        message = record.getMessage()

        # Always show errors and warnings, regardless of event type
        if record.levelno >= logging.WARNING:
            return f"{record.levelname}: {message}"

        event_type = getattr(record, "event_type", None)

        # Protocol traces only reach the console when debug logging is on
        if event_type in self.PROTOCOL_EVENTS:
            return message

        if event_type == "preamble_discarded":
            return f"   (preamble) {getattr(record, 'line', '')}"

        if record.levelname == "DEBUG":
            return None

        if event_type == "channel_opened":
            host = getattr(record, "host", "?")
            port = getattr(record, "port", "?")
            return f"Connected to {host}:{port}"

        # Hide everything else to keep console clean
        return None


class FilteringStreamHandler(logging.StreamHandler):
    """Stream handler that filters out None messages from formatter."""

    def emit(self, record):
        try:
            msg = self.format(record)
            if msg is not None:  # Only emit if formatter didn't return None
                stream = self.stream
                stream.write(msg + self.terminator)
                self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(
    log_level: int = logging.INFO, json_log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up logging for the hangman client.

    Args:
        log_level: Logging level (DEBUG enables protocol tracing on the console)
        json_log_file: Optional path to a JSON-lines log file

    Returns:
        The configured "hangman" logger
    """
    logger = logging.getLogger("hangman")
    logger.setLevel(log_level)
    logger.propagate = False
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    # Console handler (stderr) with human-readable formatter (filtered)
    console_handler = FilteringStreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(HumanReadableFormatter())
    logger.addHandler(console_handler)

    if json_log_file:
        json_handler = logging.FileHandler(json_log_file, mode="a", encoding="utf-8")
        json_handler.setLevel(log_level)
        json_handler.setFormatter(JSONFormatter())
        logger.addHandler(json_handler)

    return logger
