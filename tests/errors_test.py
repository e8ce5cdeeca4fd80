import pytest

from indexedpq import (
    DuplicateItemError,
    EmptyQueueError,
    IndexedHeapError,
    IndexedMinHeap,
    ItemNotFoundError,
)


def test_error_kinds_are_distinct():
    kinds = [DuplicateItemError, ItemNotFoundError, EmptyQueueError]
    for kind in kinds:
        assert issubclass(kind, IndexedHeapError)
        for other in kinds:
            if other is not kind:
                assert not issubclass(kind, other)


def test_errors_keep_builtin_bases():
    assert issubclass(DuplicateItemError, KeyError)
    assert issubclass(ItemNotFoundError, KeyError)
    assert issubclass(EmptyQueueError, IndexError)


@pytest.mark.parametrize(
    "action, expected",
    [
        (lambda h: h.insert("a", 0), DuplicateItemError),
        (lambda h: h.change_priority("zzz", 0), ItemNotFoundError),
        (lambda h: h.priority("zzz"), ItemNotFoundError),
        (lambda h: h.remove("zzz"), ItemNotFoundError),
    ],
)
def test_precondition_failures_leave_heap_unchanged(action, expected):
    h = IndexedMinHeap([("a", 3), ("b", 1), ("c", 2)])
    before = [(item, h.priority(item)) for item in h.to_list()]
    with pytest.raises(expected):
        action(h)
    assert [(item, h.priority(item)) for item in h.to_list()] == before


def test_base_class_catches_everything():
    h = IndexedMinHeap()
    with pytest.raises(IndexedHeapError):
        h.extract_min()
    with pytest.raises(IndexedHeapError):
        h.change_priority("a", 1)
    h.insert("a", 1)
    with pytest.raises(IndexedHeapError):
        h.insert("a", 1)
