"""Heading-delimited section segmentation for prose documents."""

from __future__ import annotations

from loguru import logger

from collate.constants import HEADING_PATTERN
from collate.segmentation.types import StructuralUnit, UnitKind
from collate.types.core import LineRange


class DocumentSegmenter:
    """Splits a document into one unit per heading.

    A section runs from its heading line to the line before the next
    heading; the last section runs to the end of the file. Lines before
    the first heading belong to no section.
    """

    def __init__(self, heading_pattern=HEADING_PATTERN) -> None:
        self._heading = heading_pattern

    def is_heading(self, line: str) -> bool:
        return self._heading.fullmatch(line) is not None

    def segment(self, lines: list[str]) -> list[StructuralUnit]:
        headings = [i + 1 for i, line in enumerate(lines) if self.is_heading(line)]
        if not headings:
            logger.debug("No headings found; document has no sections")
            return []

        boundaries = headings[1:] + [len(lines) + 1]
        units = [
            StructuralUnit(
                range=LineRange(start, next_start - 1),
                kind=UnitKind.SECTION,
                name=lines[start - 1].lstrip("#").strip(),
            )
            for start, next_start in zip(headings, boundaries)
        ]
        logger.debug("Found {} document sections", len(units))
        return units
