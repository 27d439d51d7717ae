"""Type definitions for linkedcontainers."""

from typing import TypeVar

# Item type held by every container
T = TypeVar("T")
