"""Portfolio collection service.

Walks a source tree, hands every supported file to a
ContributionExtractor, and returns the excerpts in traversal order.
Any CollateError raised for one file aborts the whole collection.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from loguru import logger

from collate.authorship import GitBlameAuthorship, LineAuthorship
from collate.config import CollateConfig
from collate.constants import DEFAULT_IGNORE_DIRS
from collate.segmentation.extractor import ContributionExtractor
from collate.segmentation.protocols import StructureSource
from collate.segmentation.types import Excerpt
from collate.types.errors import ConfigurationError, ErrorContext
from collate.utils.language_registry import LanguageInfo, detect_language


class PortfolioService:
    """Collects one author's excerpts from a directory tree.

    Usage:
        service = PortfolioService("dev@example.com", CollateConfig())
        excerpts = service.collect(Path("src"))
    """

    def __init__(
        self,
        author: str,
        config: CollateConfig | None = None,
        authorship: LineAuthorship | None = None,
        structure_source: StructureSource | None = None,
    ) -> None:
        self.author = author
        self.config = config or CollateConfig()
        self._extractor = ContributionExtractor(
            authorship or GitBlameAuthorship(),
            author,
            threshold=self.config.threshold,
            structure_source=structure_source,
        )

    def iter_files(self, root: Path) -> Iterator[Path]:
        """Yield every regular file under ``root`` in sorted walk order."""
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in DEFAULT_IGNORE_DIRS)
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if path.is_file():
                    yield path

    def iter_supported_files(self, root: Path) -> Iterator[tuple[Path, LanguageInfo]]:
        """Yield files with a registered kind; others are skipped silently."""
        for path in self.iter_files(root):
            language = detect_language(path)
            if language is None:
                logger.debug("Skipping unsupported file: {}", path)
                continue
            yield path, language

    def collect(self, root: Path) -> list[Excerpt]:
        """Extract excerpts from every supported file under ``root``."""
        root = Path(root)
        if not root.is_dir():
            raise ConfigurationError(
                f"not a directory: {root}",
                user_message="The root to scan must be an existing directory.",
                context=ErrorContext(operation="collect", file_path=str(root)),
            )

        files = list(self.iter_supported_files(root))
        logger.debug("Processing {} files under {} with {} job(s)", len(files), root, self.config.jobs)

        if self.config.jobs == 1:
            per_file = [self._extractor.extract(path, language) for path, language in files]
        else:
            with ThreadPoolExecutor(max_workers=self.config.jobs) as pool:
                per_file = list(
                    pool.map(lambda item: self._extractor.extract(*item), files)
                )

        return [excerpt for excerpts in per_file for excerpt in excerpts]
