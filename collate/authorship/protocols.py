"""Authorship source protocol.

Any per-line attribution mechanism (git blame, a fixture in tests, a
future hosted service) plugs in by satisfying LineAuthorship.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class LineAuthorship(Protocol):
    """Maps each physical line of a file to an author identity."""

    @property
    def name(self) -> str:
        """Source identifier (e.g., 'git_blame')."""
        ...

    def line_authors(self, file_path: Path) -> list[str]:
        """Return one author identity per line, in line order."""
        ...
