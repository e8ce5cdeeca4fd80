from __future__ import annotations
from typing import (
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from .errors import DuplicateItemError, EmptyQueueError, ItemNotFoundError

K = TypeVar("K", bound=Hashable)
P = TypeVar("P")


class IndexedMinHeap(Generic[K, P]):
    """A binary min-heap of unique items with mutable priorities.

    Storage layout
    --------------
    - ``_items`` is the heap array, 1-indexed (slot 0 is a ``None`` sentinel),
      so the parent of slot ``i`` is ``i // 2`` and its children are
      ``2 * i`` and ``2 * i + 1``.
    - ``_priority`` maps item -> current priority.
    - ``_item_at`` maps slot -> item and ``_position_of`` is its inverse.
      Together they let ``change_priority``/``remove`` find an arbitrary item
      in O(1) instead of scanning the array.

    Items must be hashable and not ``None``; priorities must support ``<``
    and ``>`` against each other. Not thread-safe.
    """

    __slots__ = ("_items", "_priority", "_item_at", "_position_of")

    def __init__(
        self,
        pairs: Optional[Union[Mapping[K, P], Iterable[Tuple[K, P]]]] = None,
    ) -> None:
        self._items: List[Optional[K]] = [None]
        self._priority: Dict[K, P] = {}
        self._item_at: Dict[int, K] = {}
        self._position_of: Dict[K, int] = {}
        if pairs is not None:
            # Accept dict-like or iterable of pairs
            if hasattr(pairs, "items"):
                pairs = pairs.items()  # type: ignore[union-attr]
            for item, priority in pairs:  # type: ignore[union-attr]
                self.insert(item, priority)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _check_item(item: K) -> None:
        if item is None:
            raise TypeError("item must not be None")

    @staticmethod
    def _check_priority(priority: P) -> None:
        if priority is None:
            raise TypeError("priority must not be None")

    def _priority_at(self, pos: int) -> P:
        return self._priority[self._item_at[pos]]

    def _swap(self, a: int, b: int) -> None:
        """Exchange slots ``a`` and ``b`` in the array and both index maps."""
        items = self._items
        item_a, item_b = items[a], items[b]
        items[a], items[b] = item_b, item_a
        self._item_at[a] = item_b  # type: ignore[assignment]
        self._item_at[b] = item_a  # type: ignore[assignment]
        self._position_of[item_a] = b  # type: ignore[index]
        self._position_of[item_b] = a  # type: ignore[index]

    def _swim(self, pos: int) -> int:
        """Move slot ``pos`` up while its parent is strictly greater; return final slot."""
        while pos > 1:
            parent = pos // 2
            if not self._priority_at(parent) > self._priority_at(pos):
                break
            self._swap(pos, parent)
            pos = parent
        return pos

    def _sink(self, pos: int) -> int:
        """Move slot ``pos`` down while it is strictly greater than its smaller child."""
        n = self.size()
        while True:
            child = 2 * pos
            if child > n:
                break
            right = child + 1
            # Left child wins ties
            if right <= n and self._priority_at(right) < self._priority_at(child):
                child = right
            if not self._priority_at(pos) > self._priority_at(child):
                break
            self._swap(pos, child)
            pos = child
        return pos

    def _push(self, item: K, priority: P) -> None:
        self._items.append(item)
        pos = len(self._items) - 1
        self._priority[item] = priority
        self._item_at[pos] = item
        self._position_of[item] = pos
        self._swim(pos)

    def _pop_last(self) -> Tuple[K, P]:
        """Drop the last slot and purge its item from every map."""
        pos = self.size()
        item = self._items.pop()
        del self._item_at[pos]
        del self._position_of[item]  # type: ignore[arg-type]
        return item, self._priority.pop(item)  # type: ignore[return-value, arg-type]

    def _detach(self, item: K) -> P:
        """Remove ``item`` from the heap and restore order around the slot it left."""
        pos = self._position_of[item]
        self._swap(pos, self.size())
        _, priority = self._pop_last()
        if pos <= self.size():
            # The former last element may belong to another subtree, so it can
            # need to go either way.
            self._swim(self._sink(pos))
        return priority

    def _require(self, item: K) -> None:
        if item not in self._priority:
            raise ItemNotFoundError(item)

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, item: K, priority: P) -> None:
        """Add ``item`` with ``priority`` (O(log n)).

        Raises DuplicateItemError if the item is already stored.
        """
        self._check_item(item)
        self._check_priority(priority)
        if item in self._priority:
            raise DuplicateItemError(item)
        self._push(item, priority)

    def contains(self, item: K) -> bool:
        """Return True if ``item`` is stored (O(1))."""
        return item in self._priority

    def peek_min(self) -> K:
        """Return the minimum-priority item without removing it (O(1))."""
        return self.peek_min_with_priority()[0]

    def peek_min_with_priority(self) -> Tuple[K, P]:
        if not self.size():
            raise EmptyQueueError("peek_min from empty heap")
        root = self._item_at[1]
        return root, self._priority[root]

    def extract_min(self) -> K:
        """Remove and return the minimum-priority item (O(log n))."""
        return self.extract_min_with_priority()[0]

    def extract_min_with_priority(self) -> Tuple[K, P]:
        n = self.size()
        if not n:
            raise EmptyQueueError("extract_min from empty heap")
        self._swap(1, n)
        root, priority = self._pop_last()
        if self.size():
            self._sink(1)
        return root, priority

    def change_priority(self, item: K, priority: P) -> None:
        """Give a stored item a new priority (O(log n)).

        The item is detached and re-inserted, so raising and lowering the
        priority take the same path.
        """
        self._require(item)
        self._check_priority(priority)
        self._detach(item)
        self._push(item, priority)

    def upsert(self, item: K, priority: P) -> None:
        """Insert ``item`` if absent, otherwise change its priority."""
        if item in self._priority:
            self.change_priority(item, priority)
        else:
            self.insert(item, priority)

    def priority(self, item: K) -> P:
        """Return the current priority of ``item``."""
        self._require(item)
        return self._priority[item]

    def remove(self, item: K) -> P:
        """Remove ``item`` regardless of its position and return its priority."""
        self._require(item)
        return self._detach(item)

    def clear(self) -> None:
        self._items = [None]
        self._priority.clear()
        self._item_at.clear()
        self._position_of.clear()

    def size(self) -> int:
        return len(self._items) - 1

    def to_list(self) -> List[K]:
        """Items in heap-array order (root first, otherwise unordered)."""
        return self._items[1:]  # type: ignore[return-value]

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.size() > 0

    def __contains__(self, item: object) -> bool:
        return item in self._priority

    def __iter__(self) -> Iterator[K]:
        # Heap order, not sorted order
        return iter(self.to_list())

    def __repr__(self) -> str:
        pairs = ", ".join(f"({item!r}, {self._priority[item]!r})" for item in self.to_list())
        return f"IndexedMinHeap([{pairs}])"
