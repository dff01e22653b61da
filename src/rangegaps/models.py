"""Data models for gap reports."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from rangegaps.bound import UNBOUNDED, Bound, BoundPair, Excluded, Included
from rangegaps.notation import format_bound_pair

BoundKind = Literal["unbounded", "included", "excluded"]


class BoundModel(BaseModel):
    """Serializable form of a bound over integers."""

    kind: BoundKind
    value: int | None = None

    @classmethod
    def from_bound(cls, bound: Bound) -> BoundModel:
        """Build the model from a bound."""
        if isinstance(bound, Included):
            return cls(kind="included", value=bound.value)
        if isinstance(bound, Excluded):
            return cls(kind="excluded", value=bound.value)
        return cls(kind="unbounded")

    def to_bound(self) -> Bound:
        """Convert back into a bound."""
        if self.kind == "included":
            return Included(self.value)
        if self.kind == "excluded":
            return Excluded(self.value)
        return UNBOUNDED

    @property
    def is_bounded(self) -> bool:
        """Whether this side has a value."""
        return self.kind != "unbounded"


class Interval(BaseModel):
    """An integer interval, used for both queries and gaps."""

    start: BoundModel
    end: BoundModel

    @classmethod
    def from_bounds(cls, pair: BoundPair) -> Interval:
        """Build the model from a (start, end) bound pair."""
        start, end = pair
        return cls(start=BoundModel.from_bound(start), end=BoundModel.from_bound(end))

    def to_bounds(self) -> BoundPair:
        """Convert back into a (start, end) bound pair."""
        return self.start.to_bound(), self.end.to_bound()

    @property
    def first(self) -> int | None:
        """Smallest integer inside the interval, or None if unbounded below."""
        if self.start.value is None:
            return None
        return self.start.value if self.start.kind == "included" else self.start.value + 1

    @property
    def last(self) -> int | None:
        """Largest integer inside the interval, or None if unbounded above."""
        if self.end.value is None:
            return None
        return self.end.value if self.end.kind == "included" else self.end.value - 1

    @property
    def size(self) -> int | None:
        """Number of integers in the interval, or None if it is unbounded."""
        first, last = self.first, self.last
        if first is None or last is None:
            return None
        return max(0, last - first + 1)

    @property
    def notation(self) -> str:
        """Interval notation (e.g. '[0, 1)')."""
        return format_bound_pair(*self.to_bounds())


class GapReport(BaseModel):
    """Gaps found in a query range."""

    query: Interval
    total_points: int
    points_in_range: int
    gaps: list[Interval] = Field(default_factory=list)

    @property
    def gap_count(self) -> int:
        """Number of gaps."""
        return len(self.gaps)

    @property
    def total_missing(self) -> int | None:
        """Number of values inside all gaps, or None if any gap is unbounded."""
        total = 0
        for gap in self.gaps:
            if gap.size is None:
                return None
            total += gap.size
        return total

    @property
    def coverage_percent(self) -> float | None:
        """Percentage of the query range covered by points.

        None when the query range is unbounded.
        """
        query_size = self.query.size
        if query_size is None:
            return None
        if query_size == 0:
            return 100.0
        return (self.points_in_range / query_size) * 100

    @property
    def is_complete(self) -> bool:
        """Whether the query range has no gaps at all."""
        return not self.gaps
