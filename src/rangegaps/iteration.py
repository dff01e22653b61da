"""Gap iteration over ascending sequences.

Given the values already present (an ascending iterable) and a query range,
``GapIter`` lazily yields every maximal sub-range of the query that contains
none of those values:

    ```python
    list(gaps([1, 3, 4], "[0, 6]"))
    # [(Included(value=0), Excluded(value=1)),
    #  (Excluded(value=1), Excluded(value=3)),
    #  (Excluded(value=4), Included(value=6))]
    ```
"""

from __future__ import annotations

import copy
import itertools
from collections.abc import Iterable, Iterator
from typing import Any

from rangegaps.bound import (
    Bound,
    BoundPair,
    Excluded,
    Included,
    end_lt_end,
    is_bounded,
    start_le_end,
    start_le_start,
    start_lt_start,
)
from rangegaps.canonical import bounds
from rangegaps.errors import UnorderedSequenceError

_MISSING = object()


class GapIter:
    """Iterator over the gaps between the elements of an ascending sequence.

    The iterator keeps a frontier (the start of the not yet reported part of
    the query range) which only ever moves forward. It is exhausted once the
    wrapped iterator is dropped, which happens when the sequence runs out or
    when an element reaches the end of the query range.
    """

    def __init__(
        self,
        iterable: Iterable[Any],
        start: Bound,
        end: Bound,
        *,
        check_order: bool = True,
    ) -> None:
        """Initialize the gap iterator.

        Args:
            iterable: Ascending sequence of discrete values.
            start: Start bound of the query range.
            end: End bound of the query range.
            check_order: Raise UnorderedSequenceError when an element is
                smaller than its predecessor. When disabled, unordered input
                gives unspecified (but finite for finite input) results.
        """
        self._iter: Iterator[Any] | None = iter(iterable)
        self._start = start
        self._end = end
        self._check_order = check_order
        self._previous: Any = _MISSING

    @property
    def start(self) -> Bound:
        """Start of the range that has not been reported yet."""
        return self._start

    @property
    def end(self) -> Bound:
        """End of the query range."""
        return self._end

    @property
    def exhausted(self) -> bool:
        """Whether the iterator has produced its last gap."""
        return self._iter is None

    def __iter__(self) -> GapIter:
        return self

    def __next__(self) -> BoundPair:
        while self._iter is not None:
            element = next(self._iter, _MISSING)
            if element is _MISSING:
                self._iter = None
                start, end = self._start, self._end
            else:
                self._validate_order(element)
                element_end = Excluded(element)

                if is_bounded(self._start) and start_le_start(Included(element), self._start):
                    # Elements behind the frontier are skipped; one sitting
                    # right on it pushes the frontier past itself.
                    if not start_lt_start(Included(element), self._start):
                        self._start = element_end
                        if not start_le_end(self._start, self._end):
                            self._iter = None
                    continue

                start = self._start
                self._start = element_end

                if not end_lt_end(element_end, self._end):
                    # The element reaches the end of the query range
                    self._iter = None
                    end = self._end
                else:
                    if not start_le_end(self._start, self._end):
                        self._iter = None
                    end = element_end

            # Frontier advancement can leave empty or descending candidates
            if start_le_end(start, end):
                return start, end

        raise StopIteration

    def _validate_order(self, element: Any) -> None:
        if not self._check_order:
            return
        if self._previous is not _MISSING and element < self._previous:
            raise UnorderedSequenceError(self._previous, element)
        self._previous = element

    def __copy__(self) -> GapIter:
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        if self._iter is not None:
            # tee branches replay the same elements independently
            self._iter, clone._iter = itertools.tee(self._iter)
        return clone

    def clone(self) -> GapIter:
        """Duplicate the iterator, including the position of its source.

        Both iterators yield the same remaining gaps and can be advanced
        independently afterwards.
        """
        return copy.copy(self)

    def __repr__(self) -> str:
        state = "exhausted" if self.exhausted else "active"
        return f"GapIter(start={self._start!r}, end={self._end!r}, {state})"


def gaps(iterable: Iterable[Any], query: Any, *, check_order: bool = True) -> GapIter:
    """Iterate over the gaps an ascending sequence leaves in a query range.

    Args:
        iterable: Ascending sequence of discrete values.
        query: Query range in any form accepted by ``rangegaps.bounds``.
        check_order: Validate that the sequence is ascending.

    Returns:
        Lazy iterator of (start, end) bound pairs.
    """
    start, end = bounds(query)
    return GapIter(iterable, start, end, check_order=check_order)
