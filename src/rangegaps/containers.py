"""Gap iteration over ordered containers.

Instead of scanning a whole container, ``range_gaps`` asks the container for
the elements inside the query range and feeds only those to ``GapIter``.
Mapping payloads never take part: for a ``SortedDict`` only keys are read.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterator, Sequence
from typing import Any

from sortedcontainers import SortedDict, SortedList, SortedSet

from rangegaps.bound import Bound, Excluded, Included, Unbounded
from rangegaps.canonical import bounds
from rangegaps.errors import UnsupportedContainerError
from rangegaps.iteration import GapIter


def _irange_args(start: Bound, end: Bound) -> tuple[Any, Any, tuple[bool, bool]]:
    """Translate a bound pair into sortedcontainers ``irange`` arguments."""
    match start:
        case Included(value):
            minimum, low_inclusive = value, True
        case Excluded(value):
            minimum, low_inclusive = value, False
        case Unbounded():
            minimum, low_inclusive = None, True

    match end:
        case Included(value):
            maximum, high_inclusive = value, True
        case Excluded(value):
            maximum, high_inclusive = value, False
        case Unbounded():
            maximum, high_inclusive = None, True

    return minimum, maximum, (low_inclusive, high_inclusive)


def _sequence_range(seq: Sequence[Any], start: Bound, end: Bound) -> Iterator[Any]:
    """Yield the elements of a sorted sequence that lie within the bounds."""
    match start:
        case Included(value):
            low = bisect_left(seq, value)
        case Excluded(value):
            low = bisect_right(seq, value)
        case Unbounded():
            low = 0

    match end:
        case Included(value):
            high = bisect_right(seq, value)
        case Excluded(value):
            high = bisect_left(seq, value)
        case Unbounded():
            high = len(seq)

    return (seq[i] for i in range(low, high))


def range_query(container: Any, start: Bound, end: Bound) -> Iterator[Any]:
    """Run a container's native range query over the given bounds.

    Args:
        container: A sortedcontainers ``SortedList``, ``SortedSet`` or
            ``SortedDict``, or a plain sequence sorted in ascending order.
        start: Start bound.
        end: End bound.

    Returns:
        Iterator over the elements (keys for mappings) inside the bounds.

    Raises:
        UnsupportedContainerError: If the container has no range query.
    """
    if isinstance(container, (SortedList, SortedSet, SortedDict)):
        minimum, maximum, inclusive = _irange_args(start, end)
        return container.irange(minimum, maximum, inclusive=inclusive)

    if isinstance(container, Sequence) and not isinstance(container, (str, bytes)):
        return _sequence_range(container, start, end)

    raise UnsupportedContainerError(
        f"{type(container).__name__} has no ordered range query; "
        "use a sortedcontainers type or a sorted sequence"
    )


def range_gaps(container: Any, query: Any, *, check_order: bool = True) -> GapIter:
    """Iterate over the gaps in an ordered container within a query range.

    Example:
        ```python
        ids = SortedDict({1: "foo", 99: "bar"})
        list(range_gaps(ids, range(0, 2)))
        # [(Included(value=0), Excluded(value=1))]
        ```

    Args:
        container: Ordered container (see ``range_query``).
        query: Query range in any form accepted by ``rangegaps.bounds``.
        check_order: Validate that the container yields ascending elements.

    Returns:
        Lazy iterator of (start, end) bound pairs.
    """
    start, end = bounds(query)
    return GapIter(range_query(container, start, end), start, end, check_order=check_order)
