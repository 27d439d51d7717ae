"""FIFO queue backed by the linked node chain."""

from linkedcontainers.core import LinearContainer
from linkedcontainers.types import T


class Queue(LinearContainer[T]):
    """
    First-in first-out queue.

    Enqueue links after the tail reference and dequeue unlinks the head,
    so both ends are O(1) in the worst case. Iteration follows insertion order.
    """

    _kind = "queue"

    def enqueue(self, item: T) -> None:
        """
        Add an item at the back of the queue.

        Raises:
            InvalidItemError: If item is None
        """
        self._check_item(item, "enqueue")
        self._link_last(item)

    def dequeue(self) -> T:
        """
        Remove and return the item at the front of the queue.

        Raises:
            EmptyContainerError: If the queue is empty
        """
        return self._unlink_first("dequeue")

    def peek(self) -> T:
        """
        Return the front item (the next one to be dequeued) without removing it.

        Raises:
            EmptyContainerError: If the queue is empty
        """
        return self._first_item("peek")

    def _add(self, item: T) -> None:
        self.enqueue(item)
