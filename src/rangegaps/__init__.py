"""rangegaps - Find the uncovered sub-ranges between known points."""

from rangegaps._version import __version__
from rangegaps.bound import (
    UNBOUNDED,
    Bound,
    BoundPair,
    Excluded,
    Included,
    Unbounded,
    end_lt_end,
    start_le_end,
    start_le_start,
    start_lt_start,
)
from rangegaps.canonical import (
    all_values,
    at_least,
    at_most,
    bounds,
    closed,
    closed_open,
    greater_than,
    less_than,
    open_closed,
    open_interval,
)
from rangegaps.containers import range_gaps, range_query
from rangegaps.errors import (
    GapsError,
    InvalidRangeError,
    NotIncrementableError,
    UnorderedSequenceError,
    UnsupportedContainerError,
    UnsupportedRangeError,
)
from rangegaps.inc import increment, is_incrementable, register_increment
from rangegaps.iteration import GapIter, gaps
from rangegaps.notation import format_bound_pair, parse_range

__all__ = [
    "__version__",
    # Bounds
    "Bound",
    "BoundPair",
    "Unbounded",
    "Included",
    "Excluded",
    "UNBOUNDED",
    "start_lt_start",
    "start_le_start",
    "start_le_end",
    "end_lt_end",
    # Increment capability
    "increment",
    "is_incrementable",
    "register_increment",
    # Gap iteration
    "GapIter",
    "gaps",
    "range_gaps",
    "range_query",
    # Ranges
    "bounds",
    "closed",
    "closed_open",
    "open_closed",
    "open_interval",
    "at_least",
    "at_most",
    "greater_than",
    "less_than",
    "all_values",
    "parse_range",
    "format_bound_pair",
    # Errors
    "GapsError",
    "InvalidRangeError",
    "UnsupportedRangeError",
    "UnorderedSequenceError",
    "NotIncrementableError",
    "UnsupportedContainerError",
]
