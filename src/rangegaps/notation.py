"""Mathematical interval notation for bound pairs.

``[`` and ``]`` include their endpoint, ``(`` and ``)`` exclude it. An empty
side, ``-inf``, ``inf`` or ``+inf`` leaves that side unbounded and must sit
next to a parenthesis:

    [0, 6]      -> (Included(0), Included(6))
    (1, 3)      -> (Excluded(1), Excluded(3))
    [0, )       -> (Included(0), Unbounded)
    (-inf, 5]   -> (Unbounded, Included(5))
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from rangegaps.bound import UNBOUNDED, Bound, BoundPair, Excluded, Included, Unbounded
from rangegaps.errors import InvalidRangeError

_INTERVAL_PATTERN = re.compile(r"^\s*([\[(])\s*([^,]*?)\s*,\s*([^,]*?)\s*([\])])\s*$")
_INFINITY_TOKENS = frozenset({"", "-inf", "inf", "+inf", "-∞", "∞", "+∞"})


def _parse_endpoint(
    token: str, inclusive: bool, value_type: Callable[[str], Any], text: str
) -> Bound:
    if token.lower() in _INFINITY_TOKENS:
        if inclusive:
            raise InvalidRangeError(
                f"Unbounded side cannot use a square bracket in {text!r}; use ( or )"
            )
        return UNBOUNDED
    try:
        value = value_type(token)
    except ValueError as e:
        raise InvalidRangeError(f"Invalid endpoint {token!r} in {text!r}") from e
    return Included(value) if inclusive else Excluded(value)


def parse_range(text: str, value_type: Callable[[str], Any] = int) -> BoundPair:
    """Parse interval notation into a (start, end) bound pair.

    Args:
        text: Interval such as ``"[0, 6)"``.
        value_type: Converter applied to each endpoint (default ``int``).
            Use e.g. ``date.fromisoformat`` for date intervals.

    Returns:
        Tuple of (start bound, end bound).

    Raises:
        InvalidRangeError: If the text is not valid interval notation.
    """
    match = _INTERVAL_PATTERN.match(text)
    if match is None:
        raise InvalidRangeError(
            f"Expected interval notation like '[0, 6)' but got {text!r}"
        )

    opening, low, high, closing = match.groups()
    start = _parse_endpoint(low, opening == "[", value_type, text)
    end = _parse_endpoint(high, closing == "]", value_type, text)
    return start, end


def format_bound_pair(start: Bound, end: Bound) -> str:
    """Render a bound pair in interval notation.

    Args:
        start: Start bound.
        end: End bound.

    Returns:
        String such as ``"[0, 1)"`` or ``"(4, +inf)"``.
    """
    match start:
        case Included(value):
            left = f"[{value}"
        case Excluded(value):
            left = f"({value}"
        case Unbounded():
            left = "(-inf"

    match end:
        case Included(value):
            right = f"{value}]"
        case Excluded(value):
            right = f"{value})"
        case Unbounded():
            right = "+inf)"

    return f"{left}, {right}"
