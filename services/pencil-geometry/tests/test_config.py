import logging

from pencil.config import configure_logging, eraser_threshold


def test_eraser_threshold_default(monkeypatch):
    monkeypatch.delenv("PENCIL_ERASER_THRESHOLD", raising=False)
    assert eraser_threshold() == 20


def test_eraser_threshold_override(monkeypatch):
    monkeypatch.setenv("PENCIL_ERASER_THRESHOLD", "32.5")
    assert eraser_threshold() == 32.5


def test_eraser_threshold_invalid(monkeypatch, caplog):
    monkeypatch.setenv("PENCIL_ERASER_THRESHOLD", "wide")
    with caplog.at_level(logging.WARNING, logger="pencil.config"):
        assert eraser_threshold() == 20
    assert "PENCIL_ERASER_THRESHOLD" in caplog.text


def test_configure_logging_level(monkeypatch):
    monkeypatch.setenv("PENCIL_LOG_LEVEL", "debug")
    configure_logging()
    assert logging.getLogger("pencil").level == logging.DEBUG

    monkeypatch.setenv("PENCIL_LOG_LEVEL", "nonsense")
    configure_logging()
    assert logging.getLogger("pencil").level == logging.INFO
