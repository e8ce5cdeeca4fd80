from .errors import (
    DuplicateItemError,
    EmptyQueueError,
    IndexedHeapError,
    ItemNotFoundError,
)
from .indexed_heap import IndexedMinHeap

__all__ = [
    "IndexedMinHeap",
    "IndexedHeapError",
    "DuplicateItemError",
    "ItemNotFoundError",
    "EmptyQueueError",
]
