import pytest

from refqueue.exceptions import ErrorKind, InvalidReferenceError
from refqueue.index import ReferenceIndex
from refqueue.store import OrderedStore
from refqueue.types import REMOVED, Entry, Live


def test_handles_start_at_one_and_increase():
    index = ReferenceIndex()

    assert [index.issue() for _ in range(3)] == [1, 2, 3]
    assert index.issued_count == 3


def test_reindex_tracks_shifted_positions():
    store = OrderedStore()
    index = ReferenceIndex()

    for priority in (1, 2):
        handle = index.issue()
        position = store.insert_at(
            store.find_insertion_index(priority),
            Entry(priority=priority, value=None, handle=handle),
        )
        index.reindex(store, position)

    assert index.resolve(1) == Live(1)
    assert index.resolve(2) == Live(0)


def test_tombstone_is_distinct_from_never_issued():
    index = ReferenceIndex()
    handle = index.issue()
    index.tombstone(handle)

    assert index.resolve(handle) is REMOVED
    with pytest.raises(InvalidReferenceError) as exc_info:
        index.resolve(handle + 1)
    assert exc_info.value.kind is ErrorKind.INVALID_REFERENCE
    assert exc_info.value.handle == handle + 1


@pytest.mark.parametrize("handle", [0, -1, 2, 1.0, "1", None, True])
def test_invalid_handles_are_rejected(handle):
    index = ReferenceIndex()
    index.issue()

    with pytest.raises(InvalidReferenceError):
        index.resolve(handle)


def test_live_count_ignores_tombstones():
    store = OrderedStore()
    index = ReferenceIndex()
    for priority in (3, 2, 1):
        handle = index.issue()
        store.insert_at(len(store), Entry(priority=priority, value=None, handle=handle))
    index.reindex(store)

    index.tombstone(2)

    assert index.live_count() == 2
    assert len(index) == 3
