"""Exception hierarchy and error logging for rangegaps.

All library errors derive from GapsError. Concrete errors also inherit from
the matching builtin (ValueError or TypeError) so callers that only know the
builtins still catch them.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

LOG_FILE_NAME = "rangegaps_errors.log"


class GapsError(Exception):
    """Base exception for all rangegaps errors."""

    pass


class UnorderedSequenceError(GapsError, ValueError):
    """The sequence handed to a gap iterator is not ascending.

    Attributes:
        previous: The element pulled before the offending one.
        current: The offending element, which is smaller than ``previous``.
    """

    def __init__(self, previous: Any, current: Any) -> None:
        self.previous = previous
        self.current = current
        super().__init__(
            f"Sequence is not ascending: {current!r} follows {previous!r}"
        )


class InvalidRangeError(GapsError, ValueError):
    """A range literal or interval notation string is malformed."""

    pass


class UnsupportedRangeError(InvalidRangeError, TypeError):
    """A value cannot be converted into a (start, end) bound pair."""

    pass


class NotIncrementableError(GapsError, TypeError):
    """No discrete successor is defined for a value's type."""

    pass


class UnsupportedContainerError(GapsError, TypeError):
    """A container offers no native range query."""

    pass


def get_friendly_message(error: Exception) -> str:
    """Get a one-line, user-facing message for an error.

    Args:
        error: The exception to describe.

    Returns:
        A short message suitable for console output.
    """
    if isinstance(error, UnorderedSequenceError):
        return (
            f"Points must be in ascending order ({error.current!r} came after "
            f"{error.previous!r}). Use --sort to sort them first."
        )
    if isinstance(error, UnsupportedRangeError):
        return f"Unsupported range: {error}"
    if isinstance(error, InvalidRangeError):
        return f"Invalid range: {error}"
    if isinstance(error, NotIncrementableError):
        return f"Values of this type have no successor: {error}"
    if isinstance(error, UnsupportedContainerError):
        return f"Container cannot be range-queried: {error}"
    return str(error) or type(error).__name__


def _get_log_file_path() -> Path:
    """Get the path to the error log file in the working directory."""
    return Path.cwd() / LOG_FILE_NAME


def log_error(error: Exception | str, context: str = "") -> None:
    """Append an error to the log file.

    Args:
        error: The error (exception or string).
        context: Optional context about where the error occurred.
    """
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    if isinstance(error, str):
        message = error
        error_type = "Message"
    else:
        message = str(error)
        error_type = type(error).__name__

    log_entry = f"[{timestamp}] {error_type}"
    if context:
        log_entry += f" ({context})"
    log_entry += f": {message}\n"

    try:
        with open(_get_log_file_path(), "a", encoding="utf-8") as f:
            f.write(log_entry)
    except OSError:
        # An unwritable log location must not mask the error being logged
        pass
