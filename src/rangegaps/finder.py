"""Build gap reports for a set of integer points."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from rangegaps.bound import Bound, Included, start_le_end, start_le_start
from rangegaps.canonical import bounds
from rangegaps.iteration import GapIter
from rangegaps.models import GapReport, Interval


def _in_range(value: Any, start: Bound, end: Bound) -> bool:
    point = Included(value)
    return start_le_start(start, point) and start_le_end(point, end)


class GapFinder:
    """Find the gaps a set of integer points leaves in a query range."""

    def __init__(
        self,
        check_order: bool = True,
        sort_input: bool = False,
        progress_callback: Callable[[str, int, int], None] | None = None,
    ) -> None:
        """Initialize the gap finder.

        Args:
            check_order: Reject points that are not in ascending order.
            sort_input: Sort points before looking for gaps. When set, the
                order check can never fail.
            progress_callback: Optional callback for progress updates.
                Signature: (stage: str, current: int, total: int)
        """
        self.check_order = check_order
        self.sort_input = sort_input
        self._progress = progress_callback or (lambda *args: None)

    def find_gaps(self, points: Iterable[int], query: Any) -> GapReport:
        """Find all gaps in the query range.

        Args:
            points: Points already present. Must be ascending unless
                ``sort_input`` is set.
            query: Query range in any form accepted by ``rangegaps.bounds``.

        Returns:
            Report with the query, point counts and every gap.

        Raises:
            UnorderedSequenceError: If points are out of order and
                ``check_order`` is enabled.
        """
        start, end = bounds(query)

        values = list(points)
        if self.sort_input:
            values.sort()

        self._progress("Computing gaps", 0, len(values))
        found = [
            Interval.from_bounds(gap)
            for gap in GapIter(values, start, end, check_order=self.check_order)
        ]

        self._progress("Counting points in range", len(values), len(values))
        in_range = {value for value in values if _in_range(value, start, end)}

        return GapReport(
            query=Interval.from_bounds((start, end)),
            total_points=len(values),
            points_in_range=len(in_range),
            gaps=found,
        )
