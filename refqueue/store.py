from numbers import Real
from typing import Iterator, List

from refqueue.types import Entry


class OrderedStore:
    """
    Entries sorted by descending priority.

    Equal priorities keep insertion order (oldest first),
    which is what gives FIFO tie-breaking.

    Single source of truth for positions. Every insert/remove
    returns the first index whose entry moved, so the caller
    can re-index from there.
    """

    __slots__ = ("_entries",)

    def __init__(self):
        self._entries: List[Entry] = []

    def find_insertion_index(self, priority: Real) -> int:
        """
        Index of the first entry with a strictly lower priority,
        or the store length if there is none.

        New entries therefore land after every entry of equal priority.
        """
        for index, entry in enumerate(self._entries):
            if entry.priority < priority:
                return index
        return len(self._entries)

    def insert_at(self, index: int, entry: Entry) -> int:
        if not 0 <= index <= len(self._entries):
            raise IndexError(f"Insert index out of bounds: {index}")
        self._entries.insert(index, entry)
        return index

    def remove_at(self, index: int) -> Entry:
        if not 0 <= index < len(self._entries):
            raise IndexError(f"Remove index out of bounds: {index}")
        return self._entries.pop(index)

    def clear(self) -> List[Entry]:
        removed = self._entries
        self._entries = []
        return removed

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)
