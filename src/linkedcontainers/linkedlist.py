"""General-purpose singly-linked list with head, tail and positional operations."""

import logging
import operator

from linkedcontainers.core import LinearContainer, Node
from linkedcontainers.errors import PositionError
from linkedcontainers.types import T

logger = logging.getLogger(__name__)


class SinglyLinkedList(LinearContainer[T]):
    """
    Singly-linked list with a head and a tail reference.

    Complexity:
        add_head, remove_head, add_last, peek_head, peek_last: O(1)
        remove_last: O(n), the predecessor of the tail has to be found
        get, insert, remove: O(n)
        invert, split: O(n) time, O(1) extra space

    Indices are zero-based and never wrap around: negative values are out
    of range.
    """

    _kind = "list"

    def add_head(self, item: T) -> None:
        """
        Add an item before the current head. O(1).

        Raises:
            InvalidItemError: If item is None
        """
        self._check_item(item, "add_head")
        self._link_first(item)

    def remove_head(self) -> T:
        """
        Remove and return the head item. O(1).

        Raises:
            EmptyContainerError: If the list is empty
        """
        return self._unlink_first("remove_head")

    def add_last(self, item: T) -> None:
        """
        Add an item after the current tail. O(1).

        Raises:
            InvalidItemError: If item is None
        """
        self._check_item(item, "add_last")
        self._link_last(item)

    def remove_last(self) -> T:
        """
        Remove and return the tail item. O(n).

        Raises:
            EmptyContainerError: If the list is empty
        """
        if self._require_first("remove_last").next is None:
            return self._unlink_first("remove_last")
        prev = self._node_at(self._size - 2)
        return self._unlink_after(prev)

    def peek_head(self) -> T:
        """Return the head item without removing it."""
        return self._first_item("peek_head")

    def peek_last(self) -> T:
        """Return the tail item without removing it."""
        return self._require_last("peek_last").item

    def get(self, index: int) -> T:
        """
        Return the item at ``index``.

        Args:
            index: Position in ``[0, size)``

        Raises:
            PositionError: If index is out of range
            TypeError: If index is not an integer
        """
        index = self._check_index(index, self._size, "get")
        return self._node_at(index).item

    def insert(self, index: int, item: T) -> None:
        """
        Insert ``item`` so that it ends up at ``index``.

        Args:
            index: Position in ``[0, size]``; ``size`` appends at the tail
            item: Item to insert

        Raises:
            PositionError: If index is out of range
            TypeError: If index is not an integer
            InvalidItemError: If item is None
        """
        index = self._check_index(index, self._size + 1, "insert")
        self._check_item(item, "insert")
        if index == 0:
            self._link_first(item)
        elif index == self._size:
            self._link_last(item)
        else:
            prev = self._node_at(index - 1)
            node = Node(item)
            node.next = prev.next
            prev.next = node
            self._size += 1

    def remove(self, index: int) -> T:
        """
        Remove and return the item at ``index``.

        Args:
            index: Position in ``[0, size)``

        Raises:
            PositionError: If index is out of range
            TypeError: If index is not an integer
        """
        index = self._check_index(index, self._size, "remove")
        if index == 0:
            return self._unlink_first("remove")
        return self._unlink_after(self._node_at(index - 1))

    def invert(self) -> None:
        """Reverse the list in place by flipping every link."""
        prev: Node[T] | None = None
        node = self._first
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._first, self._last = self._last, self._first
        logger.debug("Inverted %s of size %d", type(self).__name__, self._size)

    def split(self) -> "SinglyLinkedList[T]":
        """
        Split the list in two halves.

        This list keeps the first half and the second half is moved into a
        new list, which is returned. When the size is odd the first half
        gets the extra item.

        Returns:
            A new list holding the second half (possibly empty)
        """
        second: SinglyLinkedList[T] = type(self)()
        keep = (self._size + 1) // 2
        if self._size - keep > 0:
            boundary = self._node_at(keep - 1)
            second._first = boundary.next
            second._last = self._last
            second._size = self._size - keep
            boundary.next = None
            self._last = boundary
            self._size = keep
        logger.debug(
            "Split %s into sizes %d and %d", type(self).__name__, self._size, second._size
        )
        return second

    def _node_at(self, index: int) -> Node[T]:
        """Walk to the node at ``index``. O(index)."""
        node = self._first
        position = 0
        while node is not None:
            if position == index:
                return node
            node = node.next
            position += 1
        raise PositionError(f"index {index} out of range [0, {self._size})")

    def _unlink_after(self, prev: Node[T]) -> T:
        """Detach the node following ``prev`` and return its item."""
        node = prev.next
        if node is None:
            raise PositionError("no node follows the tail")
        prev.next = node.next
        if node is self._last:
            self._last = prev
        node.next = None
        self._size -= 1
        return node.item

    def _check_index(self, index: int, upper: int, operation: str) -> int:
        """Return ``index`` as an int, requiring ``0 <= index < upper``."""
        if isinstance(index, bool):
            raise TypeError("list indices must be integers, not bool")
        index = operator.index(index)
        if not 0 <= index < upper:
            logger.debug(
                "%s.%s index %d outside [0, %d)", type(self).__name__, operation, index, upper
            )
            raise PositionError(f"{operation} index {index} out of range [0, {upper})")
        return index

    def _add(self, item: T) -> None:
        self.add_last(item)
