"""
Logging event snapshot models.

A LogEvent is the read-only input to the layout: everything the formatter
needs is captured when the event is created, so formatting never reads
live context.
"""

import logging
import traceback
from types import TracebackType
from typing import Optional, Type

from pydantic import BaseModel, Field

# Attributes every stdlib LogRecord carries; anything else came in via `extra`.
_RECORD_ATTRS = frozenset((
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
    "mdc", "ndc",
))


def exception_class_name(exc_type: Type[BaseException]) -> Optional[str]:
    """
    Dotted name of an exception class.

    Builtins are reported by bare name. Classes defined inside a function
    have no importable name, so None is returned for them.
    """
    qualname = exc_type.__qualname__
    if "<locals>" in qualname:
        return None
    module = exc_type.__module__
    if not module or module == "builtins":
        return qualname
    return f"{module}.{qualname}"


class ThrowableInfo(BaseModel):
    """Captured exception class, message and stack trace."""

    exception_class: Optional[str] = None
    exception_message: Optional[str] = None
    stack_trace: Optional[list[str]] = None

    class Config:
        frozen = True

    @classmethod
    def from_exc_info(
        cls,
        exc_info: tuple[
            Optional[Type[BaseException]],
            Optional[BaseException],
            Optional[TracebackType],
        ],
    ) -> Optional["ThrowableInfo"]:
        """
        Snapshot a sys.exc_info() style triple.

        Args:
            exc_info: (type, value, traceback) triple.

        Returns:
            ThrowableInfo, or None when no exception is set.
        """
        exc_type, exc_value, exc_tb = exc_info
        if exc_type is None:
            return None

        message = None
        if exc_value is not None and exc_value.args:
            message = str(exc_value)

        lines = "".join(
            traceback.format_exception(exc_type, exc_value, exc_tb)
        ).splitlines()

        return cls(
            exception_class=exception_class_name(exc_type),
            exception_message=message,
            stack_trace=lines,
        )


class LocationInfo(BaseModel):
    """Source location of the logging call."""

    file_name: Optional[str] = None
    line_number: Optional[int] = None
    class_name: Optional[str] = None
    method_name: Optional[str] = None

    class Config:
        frozen = True


class LogEvent(BaseModel):
    """Immutable snapshot of one logging event."""

    timestamp: int
    message: str
    level: str
    ndc: Optional[str] = None
    mdc: dict[str, str] = Field(default_factory=dict)
    throwable: Optional[ThrowableInfo] = None
    location: Optional[LocationInfo] = None

    class Config:
        frozen = True

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEvent":
        """
        Snapshot a stdlib LogRecord.

        MDC entries come from ``record.mdc`` (stamped by
        DiagnosticContextFilter) merged with any ``extra`` attributes,
        which are stringified. ``extra`` wins on key collisions.
        """
        mdc = {str(k): str(v) for k, v in (getattr(record, "mdc", None) or {}).items()}
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                mdc[key] = value if isinstance(value, str) else str(value)

        throwable = None
        if record.exc_info:
            throwable = ThrowableInfo.from_exc_info(record.exc_info)

        ndc = getattr(record, "ndc", None)

        return cls(
            timestamp=int(record.created * 1000),
            message=record.getMessage(),
            level=record.levelname,
            ndc=None if ndc is None else str(ndc),
            mdc=mdc,
            throwable=throwable,
            location=LocationInfo(
                file_name=record.filename,
                line_number=record.lineno,
                class_name=record.module,
                method_name=record.funcName,
            ),
        )
