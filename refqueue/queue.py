"""
Priority queue with stable element references.

Each enqueued element gets an integer handle. The handle keeps
resolving to the element's current position through any number of
inserts, removals and re-prioritizations, and is permanently marked
removed once the element leaves the queue.

Three structures move together on every mutation:
- OrderedStore: entries in descending priority, FIFO on ties
- ReferenceIndex: handle -> Live(index) | REMOVED
- PriorityHistogram: priority -> live count
"""

from collections import Counter
from dataclasses import replace
from numbers import Real
from typing import Any, Callable, Dict, Optional

from config.settings import Settings, get_settings
from refqueue.exceptions import EmptyQueueError, QueueIntegrityError
from refqueue.histogram import PriorityHistogram
from refqueue.index import ReferenceIndex
from refqueue.log import get_logger
from refqueue.store import OrderedStore
from refqueue.types import Entry, Handle, Live, QueueSlot
from refqueue.validation import require_callable, require_position, require_priority

logger = get_logger("queue")

NOT_QUEUED = -1


class ReferencePriorityQueue:
    """
    Max-priority queue addressable by handle or by 1-based position.

    Handle lookups distinguish two "not found" cases:
    - never issued by this queue -> InvalidReferenceError
    - issued, since removed      -> -1 / False sentinel

    Not thread-safe. Every mutation is O(n).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        reject_nan: Optional[bool] = None,
        debug: Optional[bool] = None,
    ):
        settings = settings or get_settings()

        self._store = OrderedStore()
        self._index = ReferenceIndex()
        self._histogram = PriorityHistogram()

        self._reject_nan: bool = (
            settings.REJECT_NAN_PRIORITY if reject_nan is None else reject_nan
        )
        self._debug: bool = settings.DEBUG if debug is None else debug

    # ---- internal mutations ----

    def _insert(self, entry: Entry) -> int:
        index = self._store.insert_at(self._store.find_insertion_index(entry.priority), entry)
        self._index.reindex(self._store, index)
        self._histogram.increment(entry.priority)
        return index

    def _remove(self, index: int) -> Entry:
        entry = self._store.remove_at(index)
        self._index.reindex(self._store, index)
        self._histogram.decrement(entry.priority)
        return entry

    def _after_mutation(self) -> None:
        if self._debug:
            self.verify()

    # ---- insert / extract ----

    def enqueue(self, value: Any, priority: Real) -> Handle:
        """
        Add a value with the given priority (higher comes out first).

        Returns:
            New handle, one greater than the last one issued.

        Raises:
            InvalidTypeError if priority is not a real number.
        """
        require_priority(priority, reject_nan=self._reject_nan)

        handle = self._index.issue()
        index = self._insert(Entry(priority=priority, value=value, handle=handle))

        logger.debug(f"Enqueued handle {handle} at position {index + 1} (priority={priority!r})")
        self._after_mutation()
        return handle

    def peek_front(self) -> Any:
        if not self._store:
            raise EmptyQueueError("Priority queue is empty")
        return self._store[0].value

    def dequeue_front(self) -> Any:
        if not self._store:
            raise EmptyQueueError("Priority queue is empty")

        entry = self._remove(0)
        self._index.tombstone(entry.handle)

        logger.debug(f"Dequeued handle {entry.handle} (priority={entry.priority!r})")
        self._after_mutation()
        return entry.value

    # ---- counters ----

    def size(self) -> int:
        return len(self._store)

    def total_issued(self) -> int:
        """Number of handles ever issued, including removed ones."""
        return self._index.issued_count

    # ---- positional access ----

    def at(self, position: int) -> Optional[QueueSlot]:
        """
        Handle and value at a 1-based position.

        Returns:
            QueueSlot, or None when position is past the end.

        Raises:
            InvalidTypeError if position is not a whole number.
            OutOfRangeError if position <= 0.
        """
        position = require_position(position)
        # Intentionally `>` rather than `>=`: the last entry must stay
        # reachable so at(position_of(h)) always finds h.
        if position > len(self._store):
            return None

        entry = self._store[position - 1]
        return QueueSlot(handle=entry.handle, value=entry.value)

    def position_of(self, handle: Handle) -> int:
        """
        Current 1-based position of a handle, or -1 if it was removed.

        Raises:
            InvalidReferenceError if the handle was never issued.
        """
        state = self._index.resolve(handle)
        if isinstance(state, Live):
            return state.index + 1
        return NOT_QUEUED

    # ---- reference operations ----

    def change_priority(self, handle: Handle, new_priority: Real) -> int:
        """
        Move a queued element to its place for a new priority.

        The element is treated as newly inserted within its new
        priority group, so it goes after existing equal-priority entries.

        Returns:
            New 1-based position, or -1 if the handle was removed.

        Raises:
            InvalidReferenceError if the handle was never issued.
            InvalidTypeError if new_priority is not a real number.
        """
        state = self._index.resolve(handle)
        require_priority(new_priority, reject_nan=self._reject_nan)

        if not isinstance(state, Live):
            return NOT_QUEUED

        entry = self._remove(state.index)
        index = self._insert(replace(entry, priority=new_priority))

        logger.debug(
            f"Handle {handle} priority {entry.priority!r} -> {new_priority!r}, "
            f"position {state.index + 1} -> {index + 1}"
        )
        self._after_mutation()
        return index + 1

    def remove_by_handle(self, handle: Handle) -> bool:
        """
        Returns:
            True if the element was queued and is now removed,
            False if it had already been removed.

        Raises:
            InvalidReferenceError if the handle was never issued.
        """
        state = self._index.resolve(handle)
        if not isinstance(state, Live):
            return False

        entry = self._remove(state.index)
        self._index.tombstone(entry.handle)

        logger.debug(f"Removed handle {handle} from position {state.index + 1}")
        self._after_mutation()
        return True

    def remove_by_position(self, position: int) -> bool:
        """
        Returns:
            True if the position was occupied and its element removed,
            False if position is past the end.

        Raises:
            InvalidTypeError if position is not a whole number.
            OutOfRangeError if position <= 0.
        """
        position = require_position(position)
        if position > len(self._store):
            return False

        entry = self._remove(position - 1)
        self._index.tombstone(entry.handle)

        logger.debug(f"Removed handle {entry.handle} from position {position}")
        self._after_mutation()
        return True

    def clear(self) -> None:
        """
        Remove every element. Their handles become stale;
        the issued counter is kept.
        """
        removed = self._store.clear()
        for entry in removed:
            self._index.tombstone(entry.handle)
        self._histogram.clear()

        logger.debug(f"Cleared {len(removed)} entries ({self.total_issued()} handles issued so far)")
        self._after_mutation()

    # ---- traversal / observability ----

    def for_each(self, fn: Callable[[Any, int], Any]) -> None:
        """
        Call fn(value, position) for every element in priority order.

        Positions are 1-based and read live at each step. Mutating the
        queue from inside fn leaves the remaining positions undefined.

        Raises:
            InvalidTypeError if fn is not callable.
        """
        require_callable(fn)

        index = 0
        while index < len(self._store):
            entry = self._store[index]
            fn(entry.value, self.position_of(entry.handle))
            index += 1

    def stats(self) -> Dict[Real, int]:
        """Snapshot of priority -> number of queued elements with it."""
        return self._histogram.snapshot()

    def verify(self) -> None:
        """
        Re-check all structural invariants.

        Raises:
            QueueIntegrityError on the first violation found.
        """
        previous = None
        for index, entry in enumerate(self._store):
            if previous is not None and previous.priority < entry.priority:
                self._integrity_failure(
                    f"Order broken at position {index + 1}: "
                    f"{previous.priority!r} before {entry.priority!r}"
                )
            state = self._index.resolve(entry.handle)
            if state != Live(index):
                self._integrity_failure(
                    f"Handle {entry.handle} indexed as {state!r}, stored at {index}"
                )
            previous = entry

        if self._index.live_count() != len(self._store):
            self._integrity_failure(
                f"{self._index.live_count()} live handles for {len(self._store)} entries"
            )

        if len(self._index) != self._index.issued_count:
            self._integrity_failure(
                f"{len(self._index)} handle states for {self._index.issued_count} issued handles"
            )

        counts = self._histogram.snapshot()
        if 0 in counts.values():
            self._integrity_failure("Histogram holds a zero count")

        if counts != dict(Counter(entry.priority for entry in self._store)):
            self._integrity_failure(
                f"Histogram counts {self._histogram.total()} entries, store has {len(self._store)}"
            )

    def _integrity_failure(self, message: str) -> None:
        logger.error(message)
        raise QueueIntegrityError(message)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"ReferencePriorityQueue(size={self.size()}, issued={self.total_issued()})"
