"""
Structured JSON logging utilities.

Plugs JSONEventLayout into the stdlib logging package: the logging
framework owns record delivery, the formatter only renders.
"""

import logging
from typing import Optional

from logstash_layout.config import Settings, get_settings
from logstash_layout.context import DiagnosticContextFilter
from logstash_layout.event import LogEvent
from logstash_layout.layout import JSONEventLayout


class JSONEventFormatter(logging.Formatter):
    """Logstash JSON event formatter for stdlib logging handlers."""

    def __init__(self, layout: Optional[JSONEventLayout] = None):
        super().__init__()
        self.layout = layout or JSONEventLayout()

    def format(self, record: logging.LogRecord) -> str:
        # StreamHandler appends its own terminator.
        return self.layout.format(LogEvent.from_record(record)).rstrip("\n")


def setup_json_logging(
    level: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> logging.Handler:
    """Configure the root logger with logstash JSON formatting."""
    settings = settings or get_settings()
    logger = logging.getLogger()
    handler = logging.StreamHandler()
    handler.setFormatter(JSONEventFormatter(JSONEventLayout.from_settings(settings)))
    handler.addFilter(DiagnosticContextFilter())
    logger.handlers = [handler]
    logger.setLevel(level if level is not None else settings.parsed_log_level)
    return handler
