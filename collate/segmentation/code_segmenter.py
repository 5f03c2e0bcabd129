"""Declaration-level segmentation for source code.

Turns the type/member tree reported by a StructureSource into the flat
element sequence the aggregator sweeps over: a TypeBoundary for each
top-level type followed by one StructuralUnit per method, constructor or
nested type declared directly inside it.
"""

from __future__ import annotations

from dataclasses import replace

from loguru import logger

from collate.segmentation.protocols import StructureSource
from collate.segmentation.types import (
    DECLARATION_KINDS,
    NodeKind,
    SegmentElement,
    StructuralUnit,
    TypeBoundary,
    TypeNode,
    UnitKind,
)
from collate.types.core import LineRange

_UNIT_KIND: dict[NodeKind, UnitKind] = {
    NodeKind.METHOD: UnitKind.METHOD,
    NodeKind.CONSTRUCTOR: UnitKind.CONSTRUCTOR,
    NodeKind.TYPE: UnitKind.TYPE,
}


def segment_types(types: list[TypeNode]) -> list[SegmentElement]:
    """Flatten parsed types into boundaries and member units.

    Fields, initializers and any other non-declaration members are
    dropped; nested types become a single unit and are not descended
    into. Declarations sharing a line with the previous unit are folded
    into it, and a type starting on the line where the previous type
    ends gets no boundary, so units stay ascending and disjoint.
    """
    elements: list[SegmentElement] = []
    last_end = 0
    for type_node in types:
        if type_node.effective_start > last_end:
            elements.append(TypeBoundary(line=type_node.effective_start, name=type_node.name))
        for member in type_node.members:
            if member.kind not in DECLARATION_KINDS:
                continue
            previous = elements[-1] if elements else None
            if member.effective_start <= last_end and isinstance(previous, StructuralUnit):
                merged = LineRange(previous.start, max(previous.end, member.end_line))
                elements[-1] = replace(previous, range=merged)
            else:
                elements.append(
                    StructuralUnit(
                        range=LineRange(member.effective_start, member.end_line),
                        kind=_UNIT_KIND[member.kind],
                        name=member.name,
                    )
                )
            last_end = max(last_end, member.end_line)
        last_end = max(last_end, type_node.end_line)
    return elements


class CodeSegmenter:
    """Code variant of the structural segmenter."""

    def __init__(self, source: StructureSource) -> None:
        self._source = source

    @property
    def source(self) -> StructureSource:
        return self._source

    def segment(self, content: str, file_path: str, language: str) -> list[SegmentElement]:
        types = self._source.parse_types(content, file_path, language)
        elements = segment_types(types)
        logger.debug(
            "Segmented {} into {} types and {} units",
            file_path,
            len(types),
            sum(isinstance(e, StructuralUnit) for e in elements),
        )
        return elements
