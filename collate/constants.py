"""Shared constants and helpers for Collate.

Centralizes run defaults, the heading pattern for document sections,
ignore directories, and timezone-aware datetime helpers.
"""

import re
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


# A unit is attributed to the author when strictly more than this
# fraction of its lines are theirs.
DEFAULT_THRESHOLD: float = 0.5

# Files processed concurrently. Work within one file is always sequential.
DEFAULT_JOBS: int = 1

# Document section headings: one to three '#' followed by non-'#' text,
# matched against the full line.
HEADING_PATTERN: re.Pattern[str] = re.compile(r"#{1,3}[^#]+")

# Command producing one porcelain record per line, with copy detection.
GIT_BLAME_ARGS: tuple[str, ...] = ("blame", "-C", "--line-porcelain")

# Directories to skip during file traversal.
DEFAULT_IGNORE_DIRS: set[str] = {
    "node_modules",
    ".git",
    "__pycache__",
    ".venv",
    "venv",
    "dist",
    "build",
    "target",
    ".tox",
    ".svn",
    ".eggs",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
}
