"""Types for the segmentation pipeline.

These are the single source of truth passed between the structure
source, the segmenters, the aggregator and the extractor. All line
numbers are 1-based; conversions live in collate.types.core.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from collate.types.core import LineRange
from collate.utils.language_registry import FileKind


class NodeKind(StrEnum):
    """Syntactic kinds reported by a structure source."""

    TYPE = "type"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    FIELD = "field"
    OTHER = "other"


class UnitKind(StrEnum):
    """What a structural unit stands for."""

    TYPE = "type"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    SECTION = "section"


# Member kinds that become units; everything else is skipped.
DECLARATION_KINDS: frozenset[NodeKind] = frozenset(
    {NodeKind.METHOD, NodeKind.CONSTRUCTOR, NodeKind.TYPE}
)


@dataclass(frozen=True)
class MemberNode:
    """A member declaration inside a type, as reported by the parser."""

    kind: NodeKind
    start_line: int
    end_line: int
    comment_start_line: int | None = None
    name: str | None = None

    @property
    def effective_start(self) -> int:
        """Start of the leading comment if there is one, else the declaration."""
        if self.comment_start_line is not None:
            return self.comment_start_line
        return self.start_line


@dataclass(frozen=True)
class TypeNode:
    """A top-level type declaration with its ordered members."""

    start_line: int
    end_line: int
    members: tuple[MemberNode, ...] = ()
    comment_start_line: int | None = None
    name: str | None = None

    @property
    def effective_start(self) -> int:
        if self.comment_start_line is not None:
            return self.comment_start_line
        return self.start_line


@dataclass(frozen=True)
class StructuralUnit:
    """One segmentable region: a member declaration or a document section."""

    range: LineRange
    kind: UnitKind
    name: str | None = None

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end


@dataclass(frozen=True)
class TypeBoundary:
    """Marks the start of an enclosing type in a unit sequence.

    The aggregator closes any open span just before ``line`` and keeps
    ``line`` as the pending header for the type's first member.
    """

    line: int
    name: str | None = None


SegmentElement = StructuralUnit | TypeBoundary


@dataclass(frozen=True)
class Contribution:
    """A maximal run of qualifying content (1-based, inclusive)."""

    range: LineRange

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end


@dataclass
class Excerpt:
    """Text of one contribution, ready for rendering."""

    file_path: str
    kind: FileKind
    syntax: str
    text: str
    start_line: int
    end_line: int
