"""Shared fixtures for linkedcontainers tests."""

from collections.abc import Callable

import pytest

from linkedcontainers import LinearContainer


def _assert_chain_consistent(container: LinearContainer) -> None:
    """Walk the private node chain and check it agrees with the bookkeeping."""
    if container._size == 0:
        assert container._first is None
        assert container._last is None
        assert container.is_empty()
        return

    assert container._first is not None
    assert container._last is not None
    assert container._last.next is None
    assert not container.is_empty()

    count = 0
    node = container._first
    last = None
    while node is not None:
        count += 1
        last = node
        node = node.next
    assert count == container._size == container.size() == len(container)
    assert last is container._last


@pytest.fixture
def check_invariants() -> Callable[[LinearContainer], None]:
    """Return a checker for the size/first/last invariant of a container."""
    return _assert_chain_consistent
