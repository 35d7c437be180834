from .log import configure_logging
from .exceptions import (
    ErrorKind,
    QueueError,
    InvalidTypeError,
    OutOfRangeError,
    InvalidReferenceError,
    EmptyQueueError,
    QueueIntegrityError,
)
from .types import Entry, QueueSlot, Live, Removed, REMOVED, HandleState
from .queue import ReferencePriorityQueue, NOT_QUEUED

configure_logging()

__all__ = [
    "configure_logging",
    "ErrorKind",
    "QueueError",
    "InvalidTypeError",
    "OutOfRangeError",
    "InvalidReferenceError",
    "EmptyQueueError",
    "QueueIntegrityError",
    "Entry",
    "QueueSlot",
    "Live",
    "Removed",
    "REMOVED",
    "HandleState",
    "ReferencePriorityQueue",
    "NOT_QUEUED",
]
