import logging

from clipdiff._logging import NoopLogger, resolve_logger


def test_resolve_logger_default_noop():
    lg = resolve_logger()
    assert isinstance(lg, NoopLogger)
    # Should not raise:
    lg.debug("hello")
    lg.warning("world")


def test_resolve_logger_enabled_creates_logger(caplog):
    with caplog.at_level(logging.INFO):
        lg = resolve_logger(enabled=True, name="clipdiff.test")
        lg.info("test message")
    assert any("test message" in rec.message for rec in caplog.records)


def test_resolve_logger_enabled_default_name():
    lg = resolve_logger(enabled=True)
    assert lg.name == "clipdiff"


def test_resolve_logger_uses_passed_logger():
    custom = logging.getLogger("clipdiff.custom")
    assert resolve_logger(logger=custom, enabled=False) is custom


def test_resolve_logger_passes_noop_logger_through():
    noop = NoopLogger()
    assert resolve_logger(logger=noop, enabled=True) is noop


def test_resolve_logger_enabled_propagates_to_root():
    lg = resolve_logger(enabled=True, name="clipdiff.propagation", level=logging.DEBUG)
    assert lg.propagate
    assert lg.level == logging.DEBUG
