"""Tests for gap iteration over ascending sequences."""

import copy
import itertools
from datetime import date

import pytest

from rangegaps import (
    UNBOUNDED,
    Excluded,
    GapIter,
    Included,
    UnorderedSequenceError,
    at_least,
    at_most,
    closed,
    gaps,
    less_than,
    open_interval,
    start_le_end,
)

U = UNBOUNDED
I = Included  # noqa: E741
E = Excluded


def _members(start: object, end: object, lo: int = -3, hi: int = 9) -> set[int]:
    """Expand an integer bound pair into its members within [lo, hi]."""
    members = set()
    for x in range(lo, hi + 1):
        after_start = (
            start == U
            or (isinstance(start, Included) and start.value <= x)
            or (isinstance(start, Excluded) and start.value < x)
        )
        before_end = (
            end == U
            or (isinstance(end, Included) and x <= end.value)
            or (isinstance(end, Excluded) and x < end.value)
        )
        if after_start and before_end:
            members.add(x)
    return members


class TestGapIterationEmpty:
    """Tests with no points at all."""

    def test_bounded_queries(self) -> None:
        """Test the whole query range is one gap."""
        assert list(gaps([], closed(0, 0))) == [(I(0), I(0))]
        assert list(gaps([], closed(0, 1))) == [(I(0), I(1))]
        assert list(gaps([], closed(0, 2))) == [(I(0), I(2))]
        assert list(gaps([], closed(1, 3))) == [(I(1), I(3))]

    def test_unbounded_queries(self) -> None:
        """Test unbounded sides are kept."""
        assert list(gaps([], at_least(0))) == [(I(0), U)]
        assert list(gaps([], less_than(0))) == [(U, E(0))]
        assert list(gaps([], at_most(0))) == [(U, I(0))]
        assert list(gaps([], ...)) == [(U, U)]

    def test_empty_query(self) -> None:
        """Test a query whose start is after its end yields nothing."""
        assert list(gaps([], closed(5, 3))) == []
        assert list(gaps([], range(3, 3))) == []
        assert list(gaps([], open_interval(3, 4))) == []


class TestGapIterationSinglePoint:
    """Tests with the single point {2}."""

    points = [2]

    def test_query_before_point(self) -> None:
        """Test points past the query end do not split it."""
        assert list(gaps(self.points, closed(0, 0))) == [(I(0), I(0))]
        assert list(gaps(self.points, closed(0, 1))) == [(I(0), I(1))]

    def test_query_ending_on_point(self) -> None:
        """Test the point is cut off the end of the query."""
        assert list(gaps(self.points, closed(0, 2))) == [(I(0), E(2))]
        assert list(gaps(self.points, closed(1, 2))) == [(I(1), E(2))]

    def test_query_around_point(self) -> None:
        """Test the point splits the query in two."""
        assert list(gaps(self.points, closed(0, 3))) == [(I(0), E(2)), (E(2), I(3))]
        assert list(gaps(self.points, at_least(0))) == [(I(0), E(2)), (E(2), U)]
        assert list(gaps(self.points, less_than(9))) == [(U, E(2)), (E(2), E(9))]
        assert list(gaps(self.points, ...)) == [(U, E(2)), (E(2), U)]

    def test_query_starting_on_point(self) -> None:
        """Test a point on the query start moves the start past it."""
        assert list(gaps(self.points, closed(2, 5))) == [(E(2), I(5))]
        assert list(gaps(self.points, closed(2, 2))) == []

    def test_query_after_point(self) -> None:
        """Test points before the query start are skipped."""
        assert list(gaps(self.points, closed(3, 5))) == [(I(3), I(5))]


class TestGapIterationAdjacentPoints:
    """Tests with the adjacent points {1, 2}."""

    points = [1, 2]

    def test_no_gap_between_adjacent_points(self) -> None:
        """Test adjacent points never produce a zero-width gap."""
        assert list(gaps(self.points, closed(0, 0))) == [(I(0), I(0))]
        assert list(gaps(self.points, closed(0, 1))) == [(I(0), E(1))]
        assert list(gaps(self.points, closed(0, 2))) == [(I(0), E(1))]
        assert list(gaps(self.points, closed(1, 2))) == []

    def test_gap_after_run(self) -> None:
        """Test the gap following a run of points."""
        assert list(gaps(self.points, closed(0, 3))) == [(I(0), E(1)), (E(2), I(3))]
        assert list(gaps(self.points, closed(0, 6))) == [(I(0), E(1)), (E(2), I(6))]
        assert list(gaps(self.points, at_least(0))) == [(I(0), E(1)), (E(2), U)]
        assert list(gaps(self.points, less_than(9))) == [(U, E(1)), (E(2), E(9))]
        assert list(gaps(self.points, ...)) == [(U, E(1)), (E(2), U)]


class TestGapIterationThreePoints:
    """Tests with the points {1, 2, 4} and {1, 3, 4}."""

    def test_growing_query(self) -> None:
        """Test gaps as the query end moves past each point."""
        points = [1, 2, 4]
        assert list(gaps(points, closed(0, 3))) == [(I(0), E(1)), (E(2), I(3))]
        assert list(gaps(points, closed(0, 4))) == [(I(0), E(1)), (E(2), E(4))]
        assert list(gaps(points, closed(0, 5))) == [
            (I(0), E(1)),
            (E(2), E(4)),
            (E(4), I(5)),
        ]
        assert list(gaps(points, closed(0, 6))) == [
            (I(0), E(1)),
            (E(2), E(4)),
            (E(4), I(6)),
        ]

    def test_unbounded_queries(self) -> None:
        """Test unbounded sides with several points."""
        points = [1, 2, 4]
        assert list(gaps(points, at_least(0))) == [(I(0), E(1)), (E(2), E(4)), (E(4), U)]
        assert list(gaps(points, less_than(9))) == [(U, E(1)), (E(2), E(4)), (E(4), E(9))]
        assert list(gaps(points, ...)) == [(U, E(1)), (E(2), E(4)), (E(4), U)]

    def test_adjacency(self) -> None:
        """Test the gap between 1 and 3 is open on both sides."""
        assert list(gaps([1, 3, 4], closed(0, 6))) == [
            (I(0), E(1)),
            (E(1), E(3)),
            (E(4), I(6)),
        ]


class TestGapIterationEdgeCases:
    """Tests for duplicates, excluded query starts and other edge cases."""

    def test_duplicates_collapse(self) -> None:
        """Test repeated points behave like a single point."""
        assert list(gaps([2, 2, 2], closed(0, 4))) == [(I(0), E(2)), (E(2), I(4))]
        assert list(gaps([0, 0, 1, 1], closed(0, 3))) == [(E(1), I(3))]

    def test_excluded_query_start(self) -> None:
        """Test a point just after an excluded start moves the start."""
        assert list(gaps([2], open_interval(1, 5))) == [(E(2), E(5))]
        assert list(gaps([1], open_interval(1, 5))) == [(E(1), E(5))]
        assert list(gaps([3], open_interval(1, 5))) == [(E(1), E(3)), (E(3), E(5))]

    def test_point_on_excluded_end(self) -> None:
        """Test a point on an excluded end leaves the range before it."""
        assert list(gaps([5], range(0, 5))) == [(I(0), E(5))]
        assert list(gaps([4], range(0, 5))) == [(I(0), E(4))]

    def test_points_past_end_are_not_consumed(self) -> None:
        """Test iteration stops at the first point past the query end."""
        source = iter([1, 10, 11, 12])
        assert list(gaps(source, closed(0, 5))) == [(I(0), E(1)), (E(1), I(5))]
        assert list(source) == [11, 12]

    def test_all_points_before_query(self) -> None:
        """Test points entirely before the query are skipped."""
        assert list(gaps([1, 2, 3], closed(10, 12))) == [(I(10), I(12))]

    def test_points_cover_query(self) -> None:
        """Test a fully covered query has no gaps."""
        assert list(gaps(range(0, 100), closed(10, 20))) == []

    def test_dates(self) -> None:
        """Test gaps over calendar days."""
        jan = [date(2024, 1, day) for day in (2, 3, 5)]
        assert list(gaps(jan, closed(date(2024, 1, 1), date(2024, 1, 6)))) == [
            (I(date(2024, 1, 1)), E(date(2024, 1, 2))),
            (E(date(2024, 1, 3)), E(date(2024, 1, 5))),
            (E(date(2024, 1, 5)), I(date(2024, 1, 6))),
        ]


class TestGapIterationInfinite:
    """Tests with infinite sources."""

    def test_unbounded_end_is_lazy(self) -> None:
        """Test gaps are produced one at a time from an infinite source."""
        evens = itertools.count(0, 2)
        assert list(itertools.islice(gaps(evens, at_least(0)), 3)) == [
            (E(0), E(2)),
            (E(2), E(4)),
            (E(4), E(6)),
        ]

    def test_bounded_end_terminates(self) -> None:
        """Test an infinite source with a bounded end terminates."""
        evens = itertools.count(0, 2)
        assert list(gaps(evens, closed(0, 5))) == [(E(0), E(2)), (E(2), E(4)), (E(4), I(5))]

    def test_covered_bounded_query_terminates(self) -> None:
        """Test a run of points covering the query end stops the iteration."""
        naturals = itertools.count()
        assert list(gaps(naturals, closed(10, 20))) == []
        assert next(naturals) == 21


class TestGapIterationOrder:
    """Tests for ascending order validation."""

    def test_unordered_points_raise(self) -> None:
        """Test a descending step is reported with both values."""
        it = gaps([3, 1], closed(0, 10))
        assert next(it) == (I(0), E(3))
        with pytest.raises(UnorderedSequenceError) as exc_info:
            next(it)
        assert exc_info.value.previous == 3
        assert exc_info.value.current == 1
        assert "1" in str(exc_info.value) and "3" in str(exc_info.value)

    def test_unordered_points_before_query_raise(self) -> None:
        """Test skipped points are validated as well."""
        with pytest.raises(UnorderedSequenceError):
            list(gaps([5, 4, 20], closed(10, 30)))

    def test_unordered_is_value_error(self) -> None:
        """Test the order error is also a ValueError."""
        with pytest.raises(ValueError):
            list(gaps([2, 1], ...))

    def test_check_can_be_disabled(self) -> None:
        """Test unordered input is accepted without the check."""
        result = list(gaps([3, 1], closed(0, 10), check_order=False))
        assert all(start_le_end(start, end) for start, end in result)


class TestGapIterState:
    """Tests for the iterator state and cloning."""

    def test_exhausted_state(self) -> None:
        """Test the iterator reports exhaustion and stays exhausted."""
        it = gaps([1], closed(0, 1))
        assert not it.exhausted
        assert list(it) == [(I(0), E(1))]
        assert it.exhausted
        assert next(it, None) is None

    def test_frontier_advances(self) -> None:
        """Test the start property tracks the unreported frontier."""
        it = GapIter([1, 3], I(0), I(5))
        assert it.start == I(0)
        assert it.end == I(5)
        next(it)
        assert it.start == E(1)
        next(it)
        assert it.start == E(3)

    def test_iter_returns_self(self) -> None:
        """Test the gap iterator is its own iterator."""
        it = gaps([], ...)
        assert iter(it) is it

    def test_repr(self) -> None:
        """Test the representation shows the state."""
        it = gaps([], closed(0, 1))
        assert "active" in repr(it)
        list(it)
        assert "exhausted" in repr(it)

    def test_clone_yields_same_remaining_gaps(self) -> None:
        """Test a mid-traversal clone produces the same remaining items."""
        it = gaps(iter([1, 3, 4, 8]), closed(0, 10))
        assert next(it) == (I(0), E(1))
        clone = it.clone()
        expected = [(E(1), E(3)), (E(4), E(8)), (E(8), I(10))]
        assert list(it) == expected
        assert list(clone) == expected

    def test_clones_diverge_independently(self) -> None:
        """Test advancing one clone does not advance the other."""
        it = gaps(iter([1, 3, 4, 8]), closed(0, 10))
        clone = copy.copy(it)
        assert next(clone) == (I(0), E(1))
        assert next(clone) == (E(1), E(3))
        assert next(it) == (I(0), E(1))
        assert list(clone) == [(E(4), E(8)), (E(8), I(10))]
        assert list(it) == [(E(1), E(3)), (E(4), E(8)), (E(8), I(10))]

    def test_clone_of_exhausted_iterator(self) -> None:
        """Test cloning an exhausted iterator gives an exhausted iterator."""
        it = gaps([], closed(0, 1))
        list(it)
        assert list(it.clone()) == []


class TestGapIterationProperties:
    """Exhaustive checks of the coverage law over small inputs."""

    def test_gaps_are_exactly_the_uncovered_runs(self) -> None:
        """Test gaps equal the maximal runs of uncovered values, in order."""
        kinds = [(Included, Included), (Included, Excluded), (Excluded, Included), (Excluded, Excluded)]
        for mask in range(1 << 6):
            points = [x for x in range(6) if mask & (1 << x)]
            for lo, hi in itertools.product(range(-1, 7), repeat=2):
                for start_cls, end_cls in kinds:
                    start, end = start_cls(lo), end_cls(hi)
                    found = list(gaps(points, (start, end)))

                    for gap_start, gap_end in found:
                        assert start_le_end(gap_start, gap_end)

                    uncovered = sorted(_members(start, end) - set(points))
                    runs: list[list[int]] = []
                    for x in uncovered:
                        if runs and runs[-1][-1] + 1 == x:
                            runs[-1].append(x)
                        else:
                            runs.append([x])

                    assert [sorted(_members(s, e)) for s, e in found] == runs, (
                        points,
                        start,
                        end,
                    )
