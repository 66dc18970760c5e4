import logging

from taskorder.config import default_delimiter, default_log_level


def test_delimiter_defaults_to_tab(monkeypatch):
    monkeypatch.delenv("TASKORDER_DELIMITER", raising=False)
    assert default_delimiter() == "\t"


def test_delimiter_escape(monkeypatch):
    monkeypatch.setenv("TASKORDER_DELIMITER", "\\t")
    assert default_delimiter() == "\t"


def test_log_level(monkeypatch):
    monkeypatch.setenv("TASKORDER_LOG_LEVEL", "debug")
    assert default_log_level() == logging.DEBUG
    monkeypatch.setenv("TASKORDER_LOG_LEVEL", "bogus")
    assert default_log_level() == logging.WARNING
