"""Version calculation for rangegaps.

Version format: MAJOR.MINOR.PATCH where PATCH is the git commit count.
The base version (MAJOR.MINOR) is bumped manually for releases; outside a
git checkout PATCH is 0.
"""

from __future__ import annotations

import subprocess

BASE_VERSION = "0.1"


def _get_commit_count() -> int | None:
    """Get the number of commits in the repository, or None without git."""
    try:
        result = subprocess.run(
            ["git", "rev-list", "--count", "HEAD"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (subprocess.SubprocessError, OSError):
        return None
    if result.returncode != 0:
        return None
    try:
        return int(result.stdout.strip())
    except ValueError:
        return None


def get_version() -> str:
    """Get the full version string (e.g. "0.1.12")."""
    commit_count = _get_commit_count()
    return f"{BASE_VERSION}.{commit_count if commit_count is not None else 0}"


__version__ = get_version()
