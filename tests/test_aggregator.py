"""Tests for the threshold test and the contiguous-merge sweep."""

from __future__ import annotations

import pytest

from conftest import AUTHOR, OTHER

from collate.segmentation import (
    ContributionAggregator,
    StructuralUnit,
    SweepState,
    TypeBoundary,
    UnitKind,
    sweep,
    unit_fraction,
)
from collate.types import InvariantViolationError, LineRange


def unit(start: int, end: int) -> StructuralUnit:
    return StructuralUnit(LineRange(start, end), UnitKind.METHOD)


def spans(contributions) -> list[tuple[int, int]]:
    return [(c.start, c.end) for c in contributions]


# =============================================================================
# Fraction and threshold
# =============================================================================


class TestUnitFraction:
    def test_fully_owned(self):
        assert unit_fraction(unit(1, 3), [AUTHOR] * 3, AUTHOR) == 1.0

    def test_partially_owned(self):
        authors = [AUTHOR, OTHER, OTHER, AUTHOR]
        assert unit_fraction(unit(1, 4), authors, AUTHOR) == 0.5

    def test_counts_only_unit_lines(self):
        authors = [OTHER, AUTHOR, AUTHOR, OTHER]
        assert unit_fraction(unit(2, 3), authors, AUTHOR) == 1.0

    def test_exact_identity_match(self):
        assert unit_fraction(unit(1, 1), ["Alice@Example.com"], AUTHOR) == 0.0

    def test_unit_beyond_table_is_invariant_violation(self):
        with pytest.raises(InvariantViolationError):
            unit_fraction(unit(1, 5), [AUTHOR] * 4, AUTHOR)


class TestThresholdBoundary:
    def test_exactly_at_threshold_does_not_qualify(self):
        agg = ContributionAggregator(AUTHOR, threshold=0.5)
        assert not agg.qualifies(unit(1, 4), [AUTHOR, AUTHOR, OTHER, OTHER])

    def test_above_threshold_qualifies(self):
        agg = ContributionAggregator(AUTHOR, threshold=0.5)
        assert agg.qualifies(unit(1, 3), [AUTHOR, AUTHOR, OTHER])

    def test_below_threshold_does_not_qualify(self):
        agg = ContributionAggregator(AUTHOR, threshold=0.5)
        assert not agg.qualifies(unit(1, 3), [AUTHOR, OTHER, OTHER])

    def test_custom_threshold(self):
        agg = ContributionAggregator(AUTHOR, threshold=0.25)
        assert agg.qualifies(unit(1, 3), [AUTHOR, OTHER, OTHER])


# =============================================================================
# Sweep
# =============================================================================


class TestSweep:
    def test_no_units_no_contributions(self):
        assert sweep([], lambda u: True, line_count=10) == []

    def test_boundary_only_no_contributions(self):
        assert sweep([TypeBoundary(1)], lambda u: True, line_count=10) == []

    def test_adjacent_qualifying_units_merge(self):
        result = sweep([unit(1, 3), unit(4, 6)], lambda u: True, line_count=6)
        assert spans(result) == [(1, 6)]

    def test_trailing_open_span_runs_to_end_of_file(self):
        result = sweep([unit(2, 4)], lambda u: True, line_count=9)
        assert spans(result) == [(2, 9)]

    def test_non_qualifying_unit_closes_span_before_its_start(self):
        units = [unit(1, 3), unit(5, 7)]
        result = sweep(units, lambda u: u.start == 1, line_count=7)
        # line 4 (between the units) stays in the span
        assert spans(result) == [(1, 4)]

    def test_gap_unit_splits_runs(self):
        units = [unit(1, 2), unit(3, 4), unit(5, 6)]
        result = sweep(units, lambda u: u.start != 3, line_count=6)
        assert spans(result) == [(1, 2), (5, 6)]

    def test_leading_non_qualifying_units_ignored(self):
        units = [unit(1, 2), unit(3, 4)]
        result = sweep(units, lambda u: u.start == 3, line_count=4)
        assert spans(result) == [(3, 4)]

    def test_pending_header_pulls_first_member_back(self):
        elements = [TypeBoundary(1), unit(4, 6), unit(7, 9)]
        result = sweep(elements, lambda u: True, line_count=10)
        assert spans(result) == [(1, 10)]

    def test_pending_header_cleared_after_non_qualifying_first_member(self):
        elements = [TypeBoundary(1), unit(4, 6), unit(7, 9)]
        result = sweep(elements, lambda u: u.start == 7, line_count=10)
        assert spans(result) == [(7, 10)]

    def test_type_boundary_flushes_open_span(self):
        elements = [TypeBoundary(1), unit(2, 4), TypeBoundary(6), unit(7, 8)]
        result = sweep(elements, lambda u: True, line_count=9)
        assert spans(result) == [(1, 5), (6, 9)]

    def test_type_boundary_without_open_span(self):
        elements = [TypeBoundary(1), unit(2, 4), TypeBoundary(6), unit(7, 8)]
        result = sweep(elements, lambda u: u.start == 7, line_count=9)
        assert spans(result) == [(6, 9)]

    def test_memberless_type_still_flushes(self):
        elements = [TypeBoundary(1), unit(2, 3), TypeBoundary(5), TypeBoundary(8), unit(9, 10)]
        result = sweep(elements, lambda u: u.start == 2, line_count=10)
        assert spans(result) == [(1, 4)]

    def test_all_qualifying_single_contribution(self):
        units = [unit(1, 2), unit(3, 5), unit(6, 6)]
        result = sweep(units, lambda u: True, line_count=6)
        assert len(result) == 1


class TestSweepState:
    def test_close_without_open_span_is_noop(self):
        state = SweepState()
        assert state.close(5) is state

    def test_close_before_start_is_invariant_violation(self):
        with pytest.raises(InvariantViolationError):
            SweepState(open_start=5).close(3)

    def test_close_appends_contribution(self):
        state = SweepState(open_start=2).close(4)
        assert state.open_start is None
        assert spans(state.contributions) == [(2, 4)]


# =============================================================================
# Aggregator end to end on an authorship table
# =============================================================================


class TestContributionAggregator:
    def test_three_methods_middle_foreign(self):
        authors = [AUTHOR] * 3 + [OTHER] * 3 + [AUTHOR] * 3
        result = ContributionAggregator(AUTHOR).aggregate(
            [unit(1, 3), unit(4, 6), unit(7, 9)], authors
        )
        assert spans(result) == [(1, 3), (7, 9)]

    def test_lines_outside_units_never_attributed(self):
        authors = [AUTHOR] * 10
        result = ContributionAggregator(AUTHOR).aggregate([], authors)
        assert result == []

    def test_unit_sequence_is_consumed_once(self):
        authors = [AUTHOR] * 4
        result = ContributionAggregator(AUTHOR).aggregate(iter([unit(1, 2), unit(3, 4)]), authors)
        assert spans(result) == [(1, 4)]
