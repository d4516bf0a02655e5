"""Tests for the car queues and the evacuation stack."""

from datetime import datetime

import pytest

from parking_allocator.queues import CarQueue, EvacuationStack


@pytest.fixture
def queue():
    """Create an empty entry queue."""
    return CarQueue("entry")


def test_enqueue_stamps_and_counts(queue):
    """Test enqueue appends at the tail with the given timestamp."""
    now = datetime(2025, 1, 1, 12, 0, 0)
    car = queue.enqueue(1, now)
    queue.enqueue(2, now)

    assert car.id == 1
    assert car.entry_time == now
    assert queue.count == 2
    assert queue.front.id == 1
    assert queue.rear.id == 2
    assert queue.ids() == (1, 2)


def test_dequeue_is_fifo(queue):
    """Test records leave in arrival order."""
    now = datetime(2025, 1, 1, 12, 0, 0)
    for car_id in (7, 8, 9):
        queue.enqueue(car_id, now)

    assert [queue.dequeue() for _ in range(3)] == [7, 8, 9]
    assert queue.count == 0


def test_dequeue_empty_leaves_state_unchanged(queue):
    """Test dequeue on an empty queue returns None without mutation."""
    assert queue.dequeue() is None
    assert queue.front is None
    assert queue.rear is None
    assert queue.count == 0
    assert len(queue) == 0


def test_count_tracks_records_after_drain(queue):
    """Test count equals record count through a drain and refill."""
    now = datetime(2025, 1, 1, 12, 0, 0)
    queue.enqueue(1, now)
    queue.dequeue()
    queue.dequeue()
    queue.enqueue(2, now)

    assert queue.count == len(list(queue)) == 1
    assert queue.front is queue.rear


def test_push_then_pop_restores_depth():
    """Test push followed by pop returns the same id and depth."""
    stack = EvacuationStack(capacity=4)
    stack.push(1)
    before = stack.depth

    stack.push(42)
    assert stack.depth == before + 1
    assert stack.pop() == 42
    assert stack.depth == before


def test_stack_is_lifo():
    """Test ids pop in reverse push order."""
    stack = EvacuationStack(capacity=4)
    for car_id in (1, 2, 3):
        stack.push(car_id)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.pop() is None


def test_push_beyond_capacity_is_dropped_and_counted():
    """Test overflow drops the id, counts it and keeps existing contents."""
    stack = EvacuationStack(capacity=2)
    assert stack.push(1) is True
    assert stack.push(2) is True
    assert stack.is_full()

    assert stack.push(3) is False
    assert stack.dropped == 1
    assert stack.ids() == (1, 2)
    assert stack.pop() == 2


def test_peek_top_first():
    """Test peek returns up to n ids, top first, without popping."""
    stack = EvacuationStack(capacity=10)
    for car_id in range(1, 8):
        stack.push(car_id)

    assert stack.peek(5) == (7, 6, 5, 4, 3)
    assert stack.peek(0) == ()
    assert stack.peek(20) == (7, 6, 5, 4, 3, 2, 1)
    assert stack.depth == 7


def test_negative_capacity_rejected():
    """Test a negative capacity is a configuration error."""
    with pytest.raises(ValueError):
        EvacuationStack(capacity=-1)
