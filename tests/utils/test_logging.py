import logging

import pytest

from errorset.utils.logging import get_logger, time_call


def test_loggers_are_namespaced_and_configured():
    logger = get_logger("tests.logging")
    assert logger.name == "errorset.tests.logging"
    assert logging.getLogger("errorset").handlers


def test_time_call_logs_duration_and_entries(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("unit-test", logger, entries=3, threshold_ms=0) as timing:
        pass
    records = [record for record in caplog.records if record.name == logger.name]
    assert any("unit-test took" in record.message and "for 3 entries" in record.message for record in records)
    assert records[-1].levelno == logging.WARNING
    assert records[-1].entries == 3
    assert timing.elapsed_ms >= 0
    assert timing.entries == 3


def test_time_call_below_threshold_logs_debug(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("fast", logger, threshold_ms=60_000):
        pass
    records = [record for record in caplog.records if record.name == logger.name]
    assert records[-1].levelno == logging.DEBUG
    assert "for ? entries" in records[-1].message


def test_time_call_logs_when_block_raises(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with pytest.raises(RuntimeError):
        with time_call("failing", logger, entries=1):
            raise RuntimeError("boom")
    messages = [record.message for record in caplog.records if record.name == logger.name]
    assert any("failing took" in message for message in messages)
