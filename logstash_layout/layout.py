"""
Logstash JSON event layout.

Turns one LogEvent into one line of JSON in the logstash v0 event shape:

    {"@source_host":..., "@message":..., "@timestamp":..., "@fields":{...}}

Key order is part of the output contract. Non-ASCII characters are escaped
as \\uXXXX for downstream parsers that only accept ASCII.
"""

import json
import logging
from datetime import datetime, timezone, tzinfo
from typing import Optional

from logstash_layout.config import Settings, get_settings
from logstash_layout.event import LogEvent
from logstash_layout.host_data import get_host_name

logger = logging.getLogger(__name__)


def date_format(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """
    Format epoch milliseconds as yyyy-MM-ddTHH:mm:ss.SSS+HHMM.

    Args:
        timestamp: Milliseconds since the epoch.
        tz: Target timezone (defaults to the local zone).

    Returns:
        Fixed-width ISO-8601 timestamp with millisecond precision.
    """
    seconds, millis = divmod(timestamp, 1000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    dt = dt.astimezone(tz) if tz is not None else dt.astimezone()
    return f"{dt:%Y-%m-%dT%H:%M:%S}.{millis:03d}{_offset(dt)}"


def _offset(dt: datetime) -> str:
    # Seconds of historical LMT offsets are dropped to keep the field fixed width.
    total = int(dt.utcoffset().total_seconds())
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{sign}{hours:02d}{minutes:02d}"


class JSONEventLayout:
    """
    Formats LogEvents as single-line logstash JSON records.

    The host name is resolved once at construction and reused for every
    event. format() has no side effects and may be called from any number
    of threads concurrently.
    """

    def __init__(
        self,
        location_info: bool = True,
        ignore_throwable: bool = False,
        tz: Optional[tzinfo] = None,
        source_host: Optional[str] = None,
    ):
        """
        Initialize the layout.

        Args:
            location_info: Emit file/line_number/class/method under @fields.
                Defaults to True for backwards compatibility.
            ignore_throwable: Stored and queryable only; exceptions are
                always serialized when present.
            tz: Timezone for @timestamp (default: local zone).
            source_host: Host name override (default: resolved local host).
        """
        self._location_info = location_info
        self._ignore_throwable = ignore_throwable
        self._active_ignore_throwable = ignore_throwable
        self._tz = tz
        self._hostname = source_host if source_host is not None else get_host_name()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "JSONEventLayout":
        """Build a layout from Settings (default: cached environment settings)."""
        settings = settings or get_settings()
        layout = cls(
            location_info=settings.location_info,
            ignore_throwable=settings.ignore_throwable,
            tz=settings.tz,
            source_host=settings.source_host,
        )
        logger.debug(
            "JSON event layout configured",
            extra={
                "location_info": settings.location_info,
                "timezone": settings.timezone,
                "source_host": layout.source_host,
            },
        )
        return layout

    @property
    def source_host(self) -> str:
        return self._hostname

    @property
    def location_info(self) -> bool:
        """Whether log records include location information."""
        return self._location_info

    @location_info.setter
    def location_info(self, value: bool) -> None:
        self._location_info = value

    @property
    def ignore_throwable(self) -> bool:
        return self._ignore_throwable

    @ignore_throwable.setter
    def ignore_throwable(self, value: bool) -> None:
        self._ignore_throwable = value

    def ignores_throwable(self) -> bool:
        return self._ignore_throwable

    def activate_options(self) -> None:
        self._active_ignore_throwable = self._ignore_throwable

    def format(self, event: LogEvent) -> str:
        """
        Format one event.

        Args:
            event: The event snapshot.

        Returns:
            Compact JSON object followed by a single newline.
        """
        fields = {}

        if event.throwable is not None:
            throwable = event.throwable
            exception = {}
            if throwable.exception_class is not None:
                exception["exception_class"] = throwable.exception_class
            if throwable.exception_message is not None:
                exception["exception_message"] = throwable.exception_message
            if throwable.stack_trace is not None:
                stack_trace = "\n".join(throwable.stack_trace)
                if stack_trace:
                    exception["stacktrace"] = stack_trace
            fields["exception"] = exception

        if self._location_info:
            location = event.location
            fields["file"] = location.file_name if location else None
            fields["line_number"] = location.line_number if location else None
            fields["class"] = location.class_name if location else None
            fields["method"] = location.method_name if location else None

        fields["mdc"] = dict(event.mdc)
        fields["ndc"] = event.ndc
        fields["level"] = event.level

        document = {
            "@source_host": self._hostname,
            "@message": event.message,
            "@timestamp": date_format(event.timestamp, self._tz),
            "@fields": fields,
        }

        return json.dumps(document, ensure_ascii=True, separators=(",", ":")) + "\n"
