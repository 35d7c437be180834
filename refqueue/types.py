from dataclasses import dataclass
from numbers import Real
from typing import Any, NamedTuple, Union


Handle = int


@dataclass(frozen=True, slots=True)
class Entry:
    """
    A single queued element.

    The queue owns every Entry. Callers only ever see handles
    and copies of the value.
    Re-prioritizing replaces the Entry; handle and value carry over.
    """

    priority: Real
    value: Any
    handle: Handle


class QueueSlot(NamedTuple):
    """Handle and value found at a queue position."""

    handle: Handle
    value: Any


@dataclass(frozen=True, slots=True)
class Live:
    """Handle is queued at this 0-based index."""

    index: int


@dataclass(frozen=True, slots=True)
class Removed:
    """Handle was issued and has since left the queue. Terminal."""


REMOVED = Removed()

HandleState = Union[Live, Removed]
