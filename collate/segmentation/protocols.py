"""Structure source protocol for the code segmenter.

Defines the StructureSource Protocol that any parser (tree-sitter today,
an LSP or a language-native parser later) must satisfy. The segmenter
and the aggregator only ever see TypeNode/MemberNode values, never a
parser's own tree.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from collate.segmentation.types import TypeNode


@runtime_checkable
class StructureSource(Protocol):
    """Yields the declared types of a source file."""

    @property
    def name(self) -> str:
        """Source identifier (e.g., 'tree_sitter')."""
        ...

    def supports_language(self, language: str) -> bool:
        """Check if this source can parse the given language."""
        ...

    def parse_types(
        self,
        content: str,
        file_path: str,
        language: str,
    ) -> list[TypeNode]:
        """Return top-level types in source order, each with its members.

        Raises:
            StructuralParseError: The content could not be parsed.
        """
        ...
