"""Logstash v0 JSON event layout for Python logging."""

from logstash_layout.config import Settings, get_settings
from logstash_layout.context import MDC, NDC, DiagnosticContextFilter
from logstash_layout.event import LocationInfo, LogEvent, ThrowableInfo
from logstash_layout.host_data import UNKNOWN_HOST, get_host_name
from logstash_layout.json_logging import JSONEventFormatter, setup_json_logging
from logstash_layout.layout import JSONEventLayout, date_format

__all__ = [
    "DiagnosticContextFilter",
    "JSONEventFormatter",
    "JSONEventLayout",
    "LocationInfo",
    "LogEvent",
    "MDC",
    "NDC",
    "Settings",
    "ThrowableInfo",
    "UNKNOWN_HOST",
    "date_format",
    "get_host_name",
    "get_settings",
    "setup_json_logging",
]
