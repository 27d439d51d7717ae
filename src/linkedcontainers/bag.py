"""Insert-only bag backed by the linked node chain."""

from linkedcontainers.core import LinearContainer
from linkedcontainers.types import T


class Bag(LinearContainer[T]):
    """Collection that only supports adding items and examining them later."""

    _kind = "bag"

    def add(self, item: T) -> None:
        """
        Add an item to the bag. O(1).

        Items are linked at the head, so iteration yields the most recently
        added item first. Callers should not rely on that order.

        Raises:
            InvalidItemError: If item is None
        """
        self._check_item(item, "add")
        self._link_first(item)

    def _add(self, item: T) -> None:
        self.add(item)
