"""Attribution segmentation pipeline.

Splits a file into structural units, decides per unit whether the target
author owns it, and merges consecutive owned units into contributions:

    StructureSource / headings -> segmenter -> aggregator -> extractor

Usage:
    from collate.segmentation import ContributionExtractor
    extractor = ContributionExtractor(authorship, "dev@example.com")
    excerpts = extractor.extract(path, language)
"""

from collate.segmentation.types import (
    Contribution,
    Excerpt,
    MemberNode,
    NodeKind,
    SegmentElement,
    StructuralUnit,
    TypeBoundary,
    TypeNode,
    UnitKind,
)
from collate.segmentation.protocols import StructureSource
from collate.segmentation.aggregator import (
    ContributionAggregator,
    SweepState,
    sweep,
    unit_fraction,
)
from collate.segmentation.code_segmenter import CodeSegmenter, segment_types
from collate.segmentation.document_segmenter import DocumentSegmenter
from collate.segmentation.backends import TreeSitterStructureSource
from collate.segmentation.extractor import ContributionExtractor

__all__ = [
    "CodeSegmenter",
    "Contribution",
    "ContributionAggregator",
    "ContributionExtractor",
    "DocumentSegmenter",
    "Excerpt",
    "MemberNode",
    "NodeKind",
    "SegmentElement",
    "StructuralUnit",
    "StructureSource",
    "SweepState",
    "TreeSitterStructureSource",
    "TypeBoundary",
    "TypeNode",
    "UnitKind",
    "segment_types",
    "sweep",
    "unit_fraction",
]
