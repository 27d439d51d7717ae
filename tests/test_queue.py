"""Tests for the FIFO queue."""

import pytest

from linkedcontainers import EmptyContainerError, InvalidItemError, Queue


def test_enqueue_and_dequeue_scenario(check_invariants) -> None:
    """Test the enqueue/dequeue walkthrough with mixed item types."""
    queue = Queue[object]()
    assert queue.is_empty()
    assert queue.size() == 0

    queue.enqueue(1)
    queue.enqueue("Hola")
    assert queue.size() == 2
    check_invariants(queue)

    assert queue.dequeue() == 1
    assert queue.dequeue() == "Hola"
    assert queue.is_empty()
    check_invariants(queue)


def test_fifo_order() -> None:
    """Test that items come back in enqueue order."""
    queue = Queue[str]()
    for item in ("a", "b", "c"):
        queue.enqueue(item)

    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == ["a", "b", "c"]


def test_iteration_insertion_order() -> None:
    """Test that iteration follows insertion order."""
    queue = Queue[int]([1, 2, 3])
    assert list(queue) == [1, 2, 3]


def test_peek() -> None:
    """Test peeking at the front item."""
    queue = Queue[int]([10, 20])
    assert queue.peek() == 10
    assert queue.size() == 2


def test_dequeue_empty() -> None:
    """Test dequeuing from an empty queue."""
    queue = Queue[int]()
    with pytest.raises(EmptyContainerError, match="dequeue from empty queue"):
        queue.dequeue()
    assert queue.size() == 0


def test_peek_empty() -> None:
    """Test peeking at an empty queue."""
    with pytest.raises(EmptyContainerError):
        Queue[int]().peek()


def test_enqueue_none_rejected(check_invariants) -> None:
    """Test that None is not accepted and the queue is left unchanged."""
    queue = Queue[int]([1])

    with pytest.raises(InvalidItemError):
        queue.enqueue(None)  # type: ignore[arg-type]

    assert queue.size() == 1
    check_invariants(queue)


def test_reuse_after_drain(check_invariants) -> None:
    """Test that a drained queue resets its tail and accepts new items."""
    queue = Queue[int]([1, 2])
    queue.dequeue()
    queue.dequeue()
    check_invariants(queue)

    queue.enqueue(3)
    queue.enqueue(4)
    check_invariants(queue)
    assert list(queue) == [3, 4]
    assert queue.dequeue() == 3


def test_interleaved_operations(check_invariants) -> None:
    """Test FIFO order with interleaved enqueues and dequeues."""
    queue = Queue[int]()
    expected: list[int] = []
    for i in range(30):
        queue.enqueue(i)
        expected.append(i)
        if i % 4 == 3:
            assert queue.dequeue() == expected.pop(0)
            assert queue.dequeue() == expected.pop(0)
        check_invariants(queue)

    assert list(queue) == expected
