"""
Mapped and nested diagnostic context.

Context lives in contextvars, so each thread and each asyncio task sees
its own MDC and NDC. DiagnosticContextFilter copies the current values
onto a LogRecord when it is emitted.
"""

import logging
from contextvars import ContextVar
from typing import Optional

_mdc_var: ContextVar[dict[str, str]] = ContextVar("logstash_layout_mdc")
_ndc_var: ContextVar[tuple[str, ...]] = ContextVar("logstash_layout_ndc", default=())


class MDC:
    """Mapped diagnostic context: string keys to string values."""

    @staticmethod
    def put(key: str, value) -> None:
        # Copy on write so contexts copied into other tasks stay isolated.
        context = dict(_mdc_var.get({}))
        context[key] = str(value)
        _mdc_var.set(context)

    @staticmethod
    def get(key: str) -> Optional[str]:
        return _mdc_var.get({}).get(key)

    @staticmethod
    def remove(key: str) -> None:
        context = dict(_mdc_var.get({}))
        context.pop(key, None)
        _mdc_var.set(context)

    @staticmethod
    def clear() -> None:
        _mdc_var.set({})

    @staticmethod
    def get_context() -> dict[str, str]:
        """Return a copy of the current mapping."""
        return dict(_mdc_var.get({}))


class NDC:
    """Nested diagnostic context: a stack of messages."""

    @staticmethod
    def push(message: str) -> None:
        _ndc_var.set(_ndc_var.get() + (str(message),))

    @staticmethod
    def pop() -> Optional[str]:
        stack = _ndc_var.get()
        if not stack:
            return None
        _ndc_var.set(stack[:-1])
        return stack[-1]

    @staticmethod
    def peek() -> Optional[str]:
        stack = _ndc_var.get()
        return stack[-1] if stack else None

    @staticmethod
    def get() -> Optional[str]:
        """Full context as one space-separated string, None when empty."""
        stack = _ndc_var.get()
        return " ".join(stack) if stack else None

    @staticmethod
    def depth() -> int:
        return len(_ndc_var.get())

    @staticmethod
    def clear() -> None:
        _ndc_var.set(())


class DiagnosticContextFilter(logging.Filter):
    """Stamp the current MDC and NDC onto each record; never drops records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "mdc"):
            record.mdc = MDC.get_context()
        if not hasattr(record, "ndc"):
            record.ndc = NDC.get()
        return True
