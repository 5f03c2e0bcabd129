"""Markdown rendering of collected excerpts."""

from __future__ import annotations

from collections.abc import Iterable

from collate.segmentation.types import Excerpt
from collate.types.core import split_lines
from collate.utils.language_registry import FileKind

_INDENT = "    "


def render_excerpt(excerpt: Excerpt) -> str:
    """Render one excerpt under a path marker.

    Document excerpts are indented by four spaces instead of fenced,
    since Markdown cannot nest fenced blocks that may appear inside them.
    """
    parts = [f"###### {excerpt.file_path}\n\n"]
    if excerpt.kind is FileKind.DOCUMENT:
        parts.extend(f"{_INDENT}{line}\n" for line in split_lines(excerpt.text))
    else:
        parts.append(f"``` {excerpt.syntax}\n{excerpt.text}```\n")
    return "".join(parts)


def render_document(author: str, excerpts: Iterable[Excerpt]) -> str:
    """Render the full portfolio document for ``author``."""
    return f"# {author}\n\n" + "".join(render_excerpt(e) for e in excerpts)
