"""Indexed minimum-priority queue.

A binary min-heap of unique items whose priorities can be changed after
insertion in O(log n), backed by an item <-> slot index.
"""

from .datastructures import (
    DuplicateItemError,
    EmptyQueueError,
    IndexedHeapError,
    IndexedMinHeap,
    ItemNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "IndexedMinHeap",
    "IndexedHeapError",
    "DuplicateItemError",
    "ItemNotFoundError",
    "EmptyQueueError",
]
