"""Tests for the action log ring buffer."""

import pytest

from parking_allocator.action_log import ActionLog


def test_newest_first():
    """Test messages come back newest first."""
    log = ActionLog(capacity=5)
    log.record("one")
    log.record("two")
    assert log.messages() == ("two", "one")


def test_oldest_evicted_when_full():
    """Test the entry beyond capacity is dropped."""
    log = ActionLog(capacity=3)
    for message in ("a", "b", "c", "d", "e"):
        log.record(message)

    assert log.messages() == ("e", "d", "c")
    assert len(log) == 3


def test_messages_is_a_snapshot():
    """Test the returned messages do not change with later records."""
    log = ActionLog()
    log.record("first")
    snapshot = log.messages()
    log.record("second")
    assert snapshot == ("first",)


def test_zero_capacity_rejected():
    """Test a log must hold at least one message."""
    with pytest.raises(ValueError):
        ActionLog(capacity=0)


def test_records_are_mirrored_to_logging(caplog):
    """Test each message is also emitted through the logging module."""
    log = ActionLog()
    with caplog.at_level("INFO", logger="parking_allocator.action_log"):
        log.record("Car #1 joined Entry Queue")
    assert "Car #1 joined Entry Queue" in caplog.text
