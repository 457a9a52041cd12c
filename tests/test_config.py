import logging

import pytest

from record_store.config import Settings, configure_logging


def test_defaults(monkeypatch):
    for var in ("RECORD_STORE_DATA_DIR", "RECORD_STORE_ATOMIC_WRITES", "RECORD_STORE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = Settings()
    assert str(s.RECORD_STORE_DATA_DIR) == "data"
    assert s.RECORD_STORE_ATOMIC_WRITES is True
    assert s.log_level == logging.WARNING


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("TRUE", True), ("yes", True), ("on", True), ("0", False), ("no", False)],
)
def test_atomic_writes_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("RECORD_STORE_ATOMIC_WRITES", raw)
    assert Settings().RECORD_STORE_ATOMIC_WRITES is expected


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("RECORD_STORE_LOG_LEVEL", "chatty")
    assert Settings().RECORD_STORE_LOG_LEVEL == "WARNING"


def test_configure_logging_uses_level(monkeypatch):
    monkeypatch.setenv("RECORD_STORE_LOG_LEVEL", "debug")
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging()
    assert calls == [{"level": logging.DEBUG}]
