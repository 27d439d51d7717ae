"""LIFO stack backed by the linked node chain."""

from linkedcontainers.core import LinearContainer
from linkedcontainers.types import T


class Stack(LinearContainer[T]):
    """
    Last-in first-out stack.

    Items are pushed onto and popped from the head of the chain, so both
    operations are O(1). Iteration yields the most recently pushed item first.
    """

    _kind = "stack"

    def push(self, item: T) -> None:
        """
        Push an item onto the top of the stack.

        Raises:
            InvalidItemError: If item is None
        """
        self._check_item(item, "push")
        self._link_first(item)

    def pop(self) -> T:
        """
        Remove and return the top item.

        Raises:
            EmptyContainerError: If the stack is empty
        """
        return self._unlink_first("pop")

    def peek(self) -> T:
        """
        Return the top item without removing it.

        Raises:
            EmptyContainerError: If the stack is empty
        """
        return self._first_item("peek")

    def _add(self, item: T) -> None:
        self.push(item)
