from collections import defaultdict
from numbers import Real
from typing import Dict

from refqueue.exceptions import QueueIntegrityError
from refqueue.log import get_logger

logger = get_logger("histogram")


class PriorityHistogram:
    """
    Count of live entries per priority value.

    Keys with a zero count are deleted, never kept at 0.

    Priorities are keyed by plain equality/hash, so 1 and 1.0 share a
    bucket while two floats that differ in the last bit do not.
    """

    __slots__ = ("_counts",)

    def __init__(self):
        self._counts: Dict[Real, int] = defaultdict(int)

    def increment(self, priority: Real) -> None:
        self._counts[priority] += 1

    def decrement(self, priority: Real) -> None:
        count = self._counts.get(priority, 0)
        if count <= 0:
            logger.error(f"Histogram has no entries for priority {priority!r}")
            raise QueueIntegrityError(f"No live entries with priority {priority!r}")

        if count == 1:
            del self._counts[priority]
        else:
            self._counts[priority] = count - 1

    def snapshot(self) -> Dict[Real, int]:
        return dict(self._counts)

    def total(self) -> int:
        return sum(self._counts.values())

    def clear(self) -> None:
        self._counts.clear()

    def __contains__(self, priority: Real) -> bool:
        return priority in self._counts

    def __len__(self) -> int:
        return len(self._counts)
