"""linkedcontainers - Linked-node stack, queue, bag and singly-linked list."""

import logging

from linkedcontainers.bag import Bag
from linkedcontainers.core import LinearContainer
from linkedcontainers.errors import (
    ContainerError,
    EmptyContainerError,
    InvalidItemError,
    PositionError,
)
from linkedcontainers.linkedlist import SinglyLinkedList
from linkedcontainers.queue import Queue
from linkedcontainers.stack import Stack

__version__ = "0.0.1"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LinearContainer",
    "Stack",
    "Queue",
    "Bag",
    "SinglyLinkedList",
    "ContainerError",
    "InvalidItemError",
    "EmptyContainerError",
    "PositionError",
]
