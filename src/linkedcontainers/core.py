"""Singly-linked node chain shared by every container."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Generic

from linkedcontainers.errors import EmptyContainerError, InvalidItemError
from linkedcontainers.types import T

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """A node in a singly-linked chain. Owned by exactly one container."""

    __slots__ = ("item", "next")

    def __init__(self, item: T) -> None:
        self.item = item
        self.next: Node[T] | None = None


class LinearContainer(ABC, Generic[T]):
    """
    Base for the linked containers.

    Keeps a reference to the first and last node plus an element count.
    The three always agree: the count is zero exactly when both references
    are None, and it equals the number of nodes reachable from the first one.
    Subclasses expose their own add/remove names on top of the ``_link_*``
    and ``_unlink_first`` helpers, which preserve that invariant.
    """

    # Display name used in error messages ("pop from empty stack")
    _kind = "container"

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        """
        Initialize the container.

        Args:
            iterable: Initial items, added one by one with the container's
                own add operation.

        Raises:
            InvalidItemError: If any initial item is None
        """
        self._first: Node[T] | None = None
        self._last: Node[T] | None = None
        self._size = 0
        for item in iterable:
            self._add(item)

    @abstractmethod
    def _add(self, item: T) -> None:
        """Add operation used by the constructor; each subclass delegates to its own."""

    def is_empty(self) -> bool:
        """Return True if the container holds no items."""
        return self._size == 0

    def size(self) -> int:
        """Return the number of items in the container."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        """Yield items from the first node to the last. O(n)."""
        node = self._first
        while node is not None:
            yield node.item
            node = node.next

    def __contains__(self, item: object) -> bool:
        return any(current == item for current in self)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        if len(self) != len(other):  # type: ignore[arg-type]
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{type(self).__name__}[{', '.join(repr(item) for item in self)}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _check_item(self, item: T | None, operation: str) -> None:
        """Reject None before any mutation happens."""
        if item is None:
            logger.debug("Rejected None item in %s.%s", type(self).__name__, operation)
            raise InvalidItemError(f"cannot {operation} None into {self._kind}")

    def _require_first(self, operation: str) -> Node[T]:
        """Return the first node, raising EmptyContainerError if there is none."""
        if self._first is None:
            logger.debug("%s.%s called on empty %s", type(self).__name__, operation, self._kind)
            raise EmptyContainerError(f"{operation} from empty {self._kind}")
        return self._first

    def _require_last(self, operation: str) -> Node[T]:
        """Return the last node, raising EmptyContainerError if there is none."""
        if self._last is None:
            logger.debug("%s.%s called on empty %s", type(self).__name__, operation, self._kind)
            raise EmptyContainerError(f"{operation} from empty {self._kind}")
        return self._last

    def _link_first(self, item: T) -> None:
        """Insert a new node before the first one. O(1)."""
        node = Node(item)
        node.next = self._first
        self._first = node
        if self._last is None:
            self._last = node
        self._size += 1

    def _link_last(self, item: T) -> None:
        """Insert a new node after the last one. O(1)."""
        node = Node(item)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._size += 1

    def _unlink_first(self, operation: str) -> T:
        """Detach the first node and return its item. O(1)."""
        node = self._require_first(operation)
        self._first = node.next
        if self._first is None:
            self._last = None
        node.next = None
        self._size -= 1
        return node.item

    def _first_item(self, operation: str) -> T:
        """Return the first item without removing it. O(1)."""
        return self._require_first(operation).item
