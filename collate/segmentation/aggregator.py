"""Threshold test and contiguous-merge sweep.

The sweep is a left fold over the element sequence produced by either
segmenter. Its state is an immutable SweepState:

- ``open_start``: first line of the span currently being grown, if any
- ``pending_header``: start line of the enclosing type, waiting to be
  pulled into the span of that type's first member
- ``contributions``: spans emitted so far

Element rules:

- TypeBoundary(line): close any open span at ``line - 1``; remember
  ``line`` as the pending header.
- qualifying unit: open a span (at the pending header if one is set,
  else at the unit start) unless one is already open.
- non-qualifying unit: close any open span at ``unit.start - 1``.

Both unit rules clear the pending header. Whatever is still open after
the last element runs to the end of the file.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from functools import reduce

from loguru import logger

from collate.constants import DEFAULT_THRESHOLD
from collate.segmentation.types import (
    Contribution,
    SegmentElement,
    StructuralUnit,
    TypeBoundary,
)
from collate.types.core import LineRange
from collate.types.errors import InvariantViolationError


@dataclass(frozen=True)
class SweepState:
    """Accumulator threaded through the merge fold."""

    open_start: int | None = None
    pending_header: int | None = None
    contributions: tuple[Contribution, ...] = ()

    def close(self, end: int) -> SweepState:
        """Emit the open span (if any) ending at ``end`` and clear it."""
        if self.open_start is None:
            return self
        if end < self.open_start:
            raise InvariantViolationError(
                f"span starting at line {self.open_start} would end at line {end}"
            )
        span = Contribution(LineRange(self.open_start, end))
        return replace(self, open_start=None, contributions=self.contributions + (span,))


def unit_fraction(unit: StructuralUnit, authors: list[str], author: str) -> float:
    """Fraction of the unit's lines attributed to ``author``."""
    if not unit.range.fits_within(len(authors)):
        raise InvariantViolationError(
            f"unit lines {unit.start}-{unit.end} exceed the {len(authors)}-line authorship table"
        )
    owned = sum(1 for who in authors[unit.range.to_slice()] if who == author)
    return owned / unit.range.line_count


def sweep(
    elements: Iterable[SegmentElement],
    qualifies: Callable[[StructuralUnit], bool],
    line_count: int,
) -> list[Contribution]:
    """Merge consecutive qualifying units into maximal contributions.

    Args:
        elements: Units (and, for code, type boundaries) in ascending order.
        qualifies: Decides whether a single unit belongs to the author.
        line_count: Total lines in the file; a span still open at the end
            extends to this line.
    """

    def step(state: SweepState, element: SegmentElement) -> SweepState:
        if isinstance(element, TypeBoundary):
            return replace(state.close(element.line - 1), pending_header=element.line)
        if qualifies(element):
            if state.open_start is None:
                start = state.pending_header if state.pending_header is not None else element.start
                state = replace(state, open_start=start)
            return replace(state, pending_header=None)
        return replace(state.close(element.start - 1), pending_header=None)

    final = reduce(step, elements, SweepState())
    return list(final.close(line_count).contributions)


class ContributionAggregator:
    """Decides which units belong to one author and merges them.

    Usage:
        aggregator = ContributionAggregator("dev@example.com", threshold=0.5)
        spans = aggregator.aggregate(elements, authors)
    """

    def __init__(self, author: str, threshold: float = DEFAULT_THRESHOLD) -> None:
        self.author = author
        self.threshold = threshold

    def fraction(self, unit: StructuralUnit, authors: list[str]) -> float:
        return unit_fraction(unit, authors, self.author)

    def qualifies(self, unit: StructuralUnit, authors: list[str]) -> bool:
        """Strictly more than ``threshold`` of the unit's lines are the author's."""
        return self.fraction(unit, authors) > self.threshold

    def aggregate(
        self,
        elements: Iterable[SegmentElement],
        authors: list[str],
    ) -> list[Contribution]:
        contributions = sweep(
            elements,
            lambda unit: self.qualifies(unit, authors),
            line_count=len(authors),
        )
        logger.debug(
            "{} contributions for {}: {}",
            len(contributions),
            self.author,
            ", ".join(f"{c.start}-{c.end}" for c in contributions) or "none",
        )
        return contributions
