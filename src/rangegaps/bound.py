"""Interval endpoints and the comparisons between them.

A bound is one side of an interval: ``Unbounded()``, ``Included(v)`` or
``Excluded(v)``. Whether a bound acts as a start or an end depends on where
it is used, so the comparisons below come in start/start, start/end and
end/end flavours.

For discrete types an excluded endpoint at ``v`` is contiguous with an
included endpoint at ``increment(v)``. ``Excluded(1)`` as a start and
``Included(2)`` as a start therefore denote the same position, and
``(Excluded(1), Excluded(2))`` is an empty interval. Every predicate below
dispatches on all variant combinations explicitly so that this adjacency is
never lost to a plain value comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from rangegaps.inc import increment

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Unbounded:
    """No limit on this side of the interval."""

    def __repr__(self) -> str:
        return "Unbounded"


@dataclass(frozen=True, slots=True)
class Included(Generic[T]):
    """Endpoint that contains its value."""

    value: T


@dataclass(frozen=True, slots=True)
class Excluded(Generic[T]):
    """Endpoint that stops just short of its value."""

    value: T


Bound: TypeAlias = Unbounded | Included[Any] | Excluded[Any]
BoundPair: TypeAlias = tuple[Bound, Bound]

UNBOUNDED = Unbounded()


def is_bounded(bound: Bound) -> bool:
    """Check whether a bound carries a value."""
    return not isinstance(bound, Unbounded)


def bound_value(bound: Bound) -> Any:
    """Get the value of an included or excluded bound.

    Raises:
        ValueError: If the bound is unbounded.
    """
    match bound:
        case Included(value) | Excluded(value):
            return value
        case _:
            raise ValueError("Unbounded has no value")


def start_lt_start(b1: Bound, b2: Bound) -> bool:
    """Check whether start bound ``b1`` strictly precedes start bound ``b2``."""
    match (b1, b2):
        case (_, Unbounded()):
            return False
        case (Unbounded(), _):
            return True
        case (Included(a), Included(b)):
            return a < b
        case (Included(a), Excluded(b)):
            return a <= b
        case (Excluded(a), Included(b)):
            return increment(a) < b
        case (Excluded(a), Excluded(b)):
            return a < b
    raise TypeError(f"not a bound pair: {b1!r}, {b2!r}")


def start_le_start(b1: Bound, b2: Bound) -> bool:
    """Check whether start bound ``b1`` does not come after start bound ``b2``."""
    match (b1, b2):
        case (Unbounded(), _):
            return True
        case (_, Unbounded()):
            return False
        case (Included(a), Included(b)):
            return a <= b
        case (Included(a), Excluded(b)):
            return a <= increment(b)
        case (Excluded(a), Included(b)):
            return increment(a) <= b
        case (Excluded(a), Excluded(b)):
            return a <= b
    raise TypeError(f"not a bound pair: {b1!r}, {b2!r}")


def start_le_end(b1: Bound, b2: Bound) -> bool:
    """Check whether start bound ``b1`` and end bound ``b2`` enclose anything.

    This is the non-emptiness test for an interval ``(b1, b2)``.
    """
    match (b1, b2):
        case (_, Unbounded()) | (Unbounded(), _):
            return True
        case (Included(a), Included(b)):
            return a <= b
        case (Included(a), Excluded(b)):
            return a < b
        case (Excluded(a), Included(b)):
            return a < b
        case (Excluded(a), Excluded(b)):
            # (1, 2) holds nothing; plain comparison cannot tell
            return increment(a) < b
    raise TypeError(f"not a bound pair: {b1!r}, {b2!r}")


def end_lt_end(b1: Bound, b2: Bound) -> bool:
    """Check whether end bound ``b1`` strictly precedes end bound ``b2``."""
    match (b1, b2):
        case (Unbounded(), _):
            return False
        case (_, Unbounded()):
            return True
        case (Included(a), Included(b)):
            return a < b
        case (Included(a), Excluded(b)):
            return increment(a) < b
        case (Excluded(a), Included(b)):
            return a <= b
        case (Excluded(a), Excluded(b)):
            return a < b
    raise TypeError(f"not a bound pair: {b1!r}, {b2!r}")
