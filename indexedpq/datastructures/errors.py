from __future__ import annotations


class IndexedHeapError(Exception):
    """Base class for every error raised by :class:`IndexedMinHeap`."""


class DuplicateItemError(IndexedHeapError, KeyError):
    """Raised by ``insert`` when the item is already stored."""


class ItemNotFoundError(IndexedHeapError, KeyError):
    """Raised when an operation refers to an item that is not stored."""


class EmptyQueueError(IndexedHeapError, IndexError):
    """Raised by ``peek_min``/``extract_min`` on an empty heap."""
