# refqueue/index.py

from typing import Any, Dict

from refqueue.exceptions import InvalidReferenceError
from refqueue.log import get_logger
from refqueue.store import OrderedStore
from refqueue.types import REMOVED, Handle, HandleState, Live

logger = get_logger("index")


class ReferenceIndex:
    """
    Maps every issued handle to its current state.

    - Live(index) while the entry is queued
    - REMOVED once it has left (permanent)
    - never-issued handles have no state and are rejected

    Handles are 1, 2, 3, ... and are never reused.
    """

    __slots__ = ("_states", "_issued")

    def __init__(self):
        self._states: Dict[Handle, HandleState] = {}
        self._issued: int = 0

    @property
    def issued_count(self) -> int:
        return self._issued

    def issue(self) -> Handle:
        self._issued += 1
        return self._issued

    def reindex(self, store: OrderedStore, start: int = 0) -> None:
        """
        Overwrite the position of every entry from start to the end.

        Must be called after any store insert/remove, with start set to
        the first index whose entry moved.
        """
        for index in range(start, len(store)):
            self._states[store[index].handle] = Live(index)

    def tombstone(self, handle: Handle) -> None:
        self._states[handle] = REMOVED
        logger.debug(f"Handle {handle} marked removed")

    def is_issued(self, handle: Any) -> bool:
        return (
            isinstance(handle, int)
            and not isinstance(handle, bool)
            and 0 < handle <= self._issued
        )

    def resolve(self, handle: Any) -> HandleState:
        """
        Validity check shared by every handle-taking operation.

        Raises:
            InvalidReferenceError if the handle was never issued.
        """
        if not self.is_issued(handle):
            raise InvalidReferenceError(handle)
        return self._states[handle]

    def live_count(self) -> int:
        return sum(1 for state in self._states.values() if isinstance(state, Live))

    def __len__(self) -> int:
        return len(self._states)
