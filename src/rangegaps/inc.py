"""Discrete successor ("increment") capability.

Bound comparisons need the successor of a value to tell whether an excluded
endpoint at ``v`` touches an included endpoint at ``v + 1``. Only discrete
types have one, so only types registered here can be used with the gap
iterator.

Example:
    ```python
    increment(41)                 # 42
    increment(date(2024, 2, 28))  # date(2024, 2, 29)

    register_increment(Weekday, lambda d: Weekday(d.value + 1))
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta
from functools import singledispatch
from typing import Any, TypeVar

from rangegaps.errors import NotIncrementableError

T = TypeVar("T")


@singledispatch
def increment(value: Any) -> Any:
    """Return the unique discrete successor of a value.

    Overflow is not handled: for fixed-width types the caller must not ask for
    the successor of the type's maximum.

    Args:
        value: Value of a registered discrete type.

    Returns:
        The next value of the same type.

    Raises:
        NotIncrementableError: If no successor is registered for the type.
    """
    raise NotIncrementableError(
        f"{type(value).__name__} is not a discrete type (value: {value!r})"
    )


@increment.register
def _increment_int(value: int) -> int:
    return value + 1


@increment.register
def _increment_bool(value: bool) -> bool:
    raise NotIncrementableError("bool has no successor within its own type")


@increment.register
def _increment_date(value: date) -> date:
    return value + timedelta(days=1)


@increment.register
def _increment_datetime(value: datetime) -> datetime:
    # datetime subclasses date but is continuous
    raise NotIncrementableError(f"datetime is not a discrete type (value: {value!r})")


def register_increment(cls: type[T], func: Callable[[T], T]) -> None:
    """Make a new discrete type usable with bounds and gap iteration.

    Args:
        cls: The discrete type.
        func: Function returning the successor of a ``cls`` value.
    """
    increment.register(cls, func)


def is_incrementable(value: Any) -> bool:
    """Check whether a successor is defined for a value's type."""
    try:
        increment(value)
    except NotIncrementableError:
        return False
    return True
