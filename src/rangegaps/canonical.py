"""Conversion of range literals into explicit (start, end) bound pairs.

Every entry point that accepts a "range" funnels it through ``bounds`` so the
gap machinery only ever deals with bound pairs. The conversion copies values
as they are; it never shifts or normalizes them.
"""

from __future__ import annotations

from typing import Any, TypeVar

from rangegaps.bound import UNBOUNDED, Bound, BoundPair, Excluded, Included, Unbounded
from rangegaps.errors import InvalidRangeError, UnsupportedRangeError
from rangegaps.notation import parse_range

T = TypeVar("T")

_BOUND_TYPES = (Unbounded, Included, Excluded)


def bounds(range_like: Any) -> BoundPair:
    """Extract the (start, end) bounds of a range-like value.

    Supported inputs:
        - ``(Bound, Bound)`` tuples, returned as a new tuple
        - ``range(a, b)`` with step 1 -> ``[a, b)``
        - ``slice(a, b)`` without step; ``None`` means unbounded
        - ``...`` -> fully unbounded
        - objects with ``start_bound`` and ``end_bound`` attributes
        - interval notation strings such as ``"[0, 6)"`` (integer values)

    Args:
        range_like: The range to convert.

    Returns:
        Tuple of (start bound, end bound).

    Raises:
        InvalidRangeError: If a range or slice has a step other than 1, or a
            string is not valid interval notation.
        UnsupportedRangeError: If the value is not a recognised range form.
    """
    if isinstance(range_like, tuple):
        if len(range_like) == 2 and all(isinstance(b, _BOUND_TYPES) for b in range_like):
            start, end = range_like
            return start, end
        raise UnsupportedRangeError(
            f"Tuple ranges must hold exactly two bounds, got {range_like!r}"
        )

    if isinstance(range_like, range):
        if range_like.step != 1:
            raise InvalidRangeError(f"Only step-1 ranges are supported, got {range_like!r}")
        return Included(range_like.start), Excluded(range_like.stop)

    if isinstance(range_like, slice):
        if range_like.step not in (None, 1):
            raise InvalidRangeError(f"Only step-1 slices are supported, got {range_like!r}")
        start: Bound = UNBOUNDED if range_like.start is None else Included(range_like.start)
        end: Bound = UNBOUNDED if range_like.stop is None else Excluded(range_like.stop)
        return start, end

    if range_like is Ellipsis:
        return UNBOUNDED, UNBOUNDED

    if isinstance(range_like, str):
        return parse_range(range_like)

    if hasattr(range_like, "start_bound") and hasattr(range_like, "end_bound"):
        start, end = range_like.start_bound, range_like.end_bound
        if isinstance(start, _BOUND_TYPES) and isinstance(end, _BOUND_TYPES):
            return start, end

    raise UnsupportedRangeError(f"Cannot derive bounds from {type(range_like).__name__}")


# Range constructors


def closed(low: T, high: T) -> BoundPair:
    """``[low, high]``"""
    return Included(low), Included(high)


def closed_open(low: T, high: T) -> BoundPair:
    """``[low, high)``"""
    return Included(low), Excluded(high)


def open_closed(low: T, high: T) -> BoundPair:
    """``(low, high]``"""
    return Excluded(low), Included(high)


def open_interval(low: T, high: T) -> BoundPair:
    """``(low, high)``"""
    return Excluded(low), Excluded(high)


def at_least(low: T) -> BoundPair:
    """``[low, +inf)``"""
    return Included(low), UNBOUNDED


def greater_than(low: T) -> BoundPair:
    """``(low, +inf)``"""
    return Excluded(low), UNBOUNDED


def at_most(high: T) -> BoundPair:
    """``(-inf, high]``"""
    return UNBOUNDED, Included(high)


def less_than(high: T) -> BoundPair:
    """``(-inf, high)``"""
    return UNBOUNDED, Excluded(high)


def all_values() -> BoundPair:
    """``(-inf, +inf)``"""
    return UNBOUNDED, UNBOUNDED
