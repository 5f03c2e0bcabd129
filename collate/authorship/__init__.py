"""Per-line authorship sources.

Usage:
    from collate.authorship import GitBlameAuthorship, resolve_authorship
    authors = resolve_authorship(GitBlameAuthorship(), path, len(lines))
"""

from collate.authorship.git_blame import (
    GitBlameAuthorship,
    parse_line_porcelain,
    resolve_authorship,
)
from collate.authorship.protocols import LineAuthorship

__all__ = [
    "GitBlameAuthorship",
    "LineAuthorship",
    "parse_line_porcelain",
    "resolve_authorship",
]
