"""Shared fixtures for layout tests."""

from datetime import timezone

import pytest

from logstash_layout.config import get_settings
from logstash_layout.context import MDC, NDC
from logstash_layout.event import LogEvent
from logstash_layout.host_data import get_host_name
from logstash_layout.layout import JSONEventLayout


@pytest.fixture(autouse=True)
def _reset_state():
    MDC.clear()
    NDC.clear()
    get_settings.cache_clear()
    get_host_name.cache_clear()
    yield
    MDC.clear()
    NDC.clear()
    get_settings.cache_clear()
    get_host_name.cache_clear()


@pytest.fixture
def layout() -> JSONEventLayout:
    return JSONEventLayout(location_info=False, tz=timezone.utc, source_host="test-host")


@pytest.fixture
def make_event():
    def _make(**overrides) -> LogEvent:
        values = {"timestamp": 1000000000000, "message": "hello", "level": "INFO"}
        values.update(overrides)
        return LogEvent(**values)

    return _make
