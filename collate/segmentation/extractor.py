"""Per-file contribution extraction.

The ContributionExtractor is the single entry point for turning one file
into excerpts. For a file it:

1. reads the content and splits it into lines,
2. resolves the authorship table and checks it covers every line,
3. segments the content with the variant for its kind,
4. aggregates units into contributions,
5. slices each contribution's lines into excerpt text.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from collate.authorship import LineAuthorship, resolve_authorship
from collate.constants import DEFAULT_THRESHOLD
from collate.segmentation.aggregator import ContributionAggregator
from collate.segmentation.code_segmenter import CodeSegmenter
from collate.segmentation.document_segmenter import DocumentSegmenter
from collate.segmentation.protocols import StructureSource
from collate.segmentation.types import Contribution, Excerpt, SegmentElement
from collate.types.core import split_lines
from collate.types.errors import CollateError, ErrorCode, ErrorContext, InvariantViolationError
from collate.utils.language_registry import FileKind, LanguageInfo


def read_lines(file_path: Path) -> list[str]:
    """Read a file as UTF-8 (undecodable bytes replaced) and split it into lines."""
    try:
        data = Path(file_path).read_bytes()
    except OSError as e:
        raise CollateError(
            code=ErrorCode.FILE_READ_FAILED,
            message=f"could not read {file_path}: {e}",
            user_message="Failed to read a file.",
            context=ErrorContext(operation="read_lines", file_path=str(file_path)),
            original_error=e,
        ) from e
    return split_lines(data.decode("utf-8", errors="replace"))


def slice_contribution(lines: list[str], contribution: Contribution, file_path: str | None = None) -> str:
    """Join the lines of a contribution, each terminated by a newline."""
    if not contribution.range.fits_within(len(lines)):
        raise InvariantViolationError(
            f"contribution {contribution.start}-{contribution.end} exceeds {len(lines)} lines",
            file_path=file_path,
        )
    return "".join(f"{line}\n" for line in lines[contribution.range.to_slice()])


class ContributionExtractor:
    """Runs authorship, segmentation and aggregation for one file at a time.

    Usage:
        extractor = ContributionExtractor(GitBlameAuthorship(), "dev@example.com")
        excerpts = extractor.extract(path, detect_language(path))
    """

    def __init__(
        self,
        authorship: LineAuthorship,
        author: str,
        threshold: float = DEFAULT_THRESHOLD,
        structure_source: StructureSource | None = None,
    ) -> None:
        if structure_source is None:
            from collate.segmentation.backends import get_shared_structure_source

            structure_source = get_shared_structure_source()
        self._authorship = authorship
        self._aggregator = ContributionAggregator(author, threshold)
        self._code_segmenter = CodeSegmenter(structure_source)
        self._document_segmenter = DocumentSegmenter()

    @property
    def aggregator(self) -> ContributionAggregator:
        return self._aggregator

    def segment(self, lines: list[str], file_path: str, language: LanguageInfo) -> list[SegmentElement]:
        """Dispatch to the segmenter matching the file kind."""
        if language.kind is FileKind.DOCUMENT:
            return list(self._document_segmenter.segment(lines))
        content = "\n".join(lines)
        return self._code_segmenter.segment(content, file_path, language.syntax)

    def contributions(self, file_path: Path, language: LanguageInfo) -> tuple[list[str], list[Contribution]]:
        """Compute the contribution spans of a file along with its lines."""
        lines = read_lines(file_path)
        authors = resolve_authorship(self._authorship, file_path, len(lines))
        elements = self.segment(lines, str(file_path), language)
        return lines, self._aggregator.aggregate(elements, authors)

    def extract(self, file_path: Path, language: LanguageInfo) -> list[Excerpt]:
        lines, contributions = self.contributions(file_path, language)
        excerpts = [
            Excerpt(
                file_path=str(file_path),
                kind=language.kind,
                syntax=language.syntax,
                text=slice_contribution(lines, c, str(file_path)),
                start_line=c.start,
                end_line=c.end,
            )
            for c in contributions
        ]
        if excerpts:
            logger.info("{}: {} excerpt(s)", file_path, len(excerpts))
        return excerpts
