"""Tests for host name resolution."""

import socket

from logstash_layout.host_data import UNKNOWN_HOST, get_host_name, resolve_host_name
from logstash_layout.layout import JSONEventLayout


def _fail():
    raise OSError("no network")


def test_resolve_host_name(monkeypatch) -> None:
    monkeypatch.setattr(socket, "gethostname", lambda: "box-1")
    assert resolve_host_name() == "box-1"


def test_resolution_failure_falls_back(monkeypatch, caplog) -> None:
    monkeypatch.setattr(socket, "gethostname", _fail)
    assert resolve_host_name() == UNKNOWN_HOST
    assert "Failed to resolve local host name" in caplog.text


def test_empty_host_name_falls_back(monkeypatch) -> None:
    monkeypatch.setattr(socket, "gethostname", lambda: "")
    assert resolve_host_name() == UNKNOWN_HOST


def test_layout_construction_survives_failure(monkeypatch) -> None:
    monkeypatch.setattr(socket, "gethostname", _fail)
    assert JSONEventLayout().source_host == UNKNOWN_HOST


def test_get_host_name_is_cached(monkeypatch) -> None:
    monkeypatch.setattr(socket, "gethostname", lambda: "first")
    assert get_host_name() == "first"
    monkeypatch.setattr(socket, "gethostname", lambda: "second")
    assert get_host_name() == "first"
