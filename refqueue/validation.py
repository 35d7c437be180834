# refqueue/validation.py

import math
from numbers import Real
from typing import Any, Callable

from refqueue.exceptions import InvalidTypeError, OutOfRangeError


def _is_real(value: Any) -> bool:
    # bool is an int subclass but never a meaningful priority or position
    return isinstance(value, Real) and not isinstance(value, bool)


def require_priority(value: Any, *, reject_nan: bool = True) -> Real:
    """
    Fails fast on priorities the ordering cannot handle.

    Any real number is accepted, including negatives, fractions and
    infinities. NaN compares false against everything, so its place in
    the order is undefined; it is refused unless reject_nan is off.
    """
    if not _is_real(value):
        raise InvalidTypeError(f"Priority must be a real number, got {type(value).__name__}")

    # value != value only holds for NaN and never converts to float
    if reject_nan and value != value:
        raise InvalidTypeError("Priority must not be NaN")

    return value


def require_position(value: Any) -> int:
    """
    Validates a 1-based queue position and returns it as int.
    """
    if not _is_real(value):
        raise InvalidTypeError(f"Position must be a number, got {type(value).__name__}")

    if value != value:
        raise InvalidTypeError("Position must not be NaN")

    if value <= 0:
        raise OutOfRangeError(f"Position must be >= 1, got {value!r}")

    if value in (math.inf, -math.inf) or int(value) != value:
        raise InvalidTypeError(f"Position must be a whole number, got {value!r}")

    return int(value)


def require_callable(fn: Any) -> Callable[..., Any]:
    if not callable(fn):
        raise InvalidTypeError(f"Expected a callable, got {type(fn).__name__}")
    return fn
