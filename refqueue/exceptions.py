# refqueue/exceptions.py

from enum import Enum


class ErrorKind(str, Enum):
    """
    Closed set of failure kinds raised by the queue.
    """

    INVALID_TYPE = "INVALID_TYPE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_REFERENCE = "INVALID_REFERENCE"
    EMPTY_QUEUE = "EMPTY_QUEUE"
    INTEGRITY = "INTEGRITY"


class QueueError(Exception):
    """Base class for queue errors"""

    kind: ErrorKind


class InvalidTypeError(QueueError, TypeError):
    """Raised when an argument has the wrong type (priority, position, callback)."""

    kind = ErrorKind.INVALID_TYPE


class OutOfRangeError(QueueError, ValueError):
    """Raised when a 1-based position is zero or negative."""

    kind = ErrorKind.OUT_OF_RANGE


class InvalidReferenceError(QueueError, LookupError):
    """Raised when a handle was never issued by this queue."""

    kind = ErrorKind.INVALID_REFERENCE

    def __init__(self, handle):
        super().__init__(f"Handle was never issued by this queue: {handle!r}")
        self.handle = handle


class EmptyQueueError(QueueError, IndexError):
    """Raised when reading the front of an empty queue."""

    kind = ErrorKind.EMPTY_QUEUE


class QueueIntegrityError(QueueError, RuntimeError):
    """Internal state no longer satisfies the queue invariants."""

    kind = ErrorKind.INTEGRITY
