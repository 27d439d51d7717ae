"""Exception classes for linkedcontainers."""


class ContainerError(Exception):
    """Base exception for all linkedcontainers errors."""


class InvalidItemError(ContainerError, TypeError):
    """Raised when an add operation receives None as the item."""


class EmptyContainerError(ContainerError, IndexError):
    """Raised when removing or peeking from a container with no items."""


class PositionError(ContainerError, IndexError):
    """Raised when a list index falls outside the valid range for the operation."""
