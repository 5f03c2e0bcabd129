"""File kind detection.

Maps file extensions to the segmentation variant used for the file and
the syntax name used when rendering its excerpts. Files whose extension
is not registered are not processed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class FileKind(StrEnum):
    """Which segmenter handles a file."""

    CODE = "code"
    DOCUMENT = "document"


@dataclass(frozen=True)
class LanguageInfo:
    """How a registered file type is segmented and rendered."""

    syntax: str
    kind: FileKind
    extensions: tuple[str, ...]


LANGUAGES: dict[str, LanguageInfo] = {
    "java": LanguageInfo("java", FileKind.CODE, (".java",)),
    "python": LanguageInfo("python", FileKind.CODE, (".py",)),
    "markdown": LanguageInfo("markdown", FileKind.DOCUMENT, (".md", ".markdown")),
}

EXTENSION_TO_LANGUAGE: dict[str, LanguageInfo] = {
    ext: info for info in LANGUAGES.values() for ext in info.extensions
}


def detect_language(file_path: str | Path) -> LanguageInfo | None:
    """Look up the language of a file from its name.

    Returns:
        The LanguageInfo, or None when the file kind is unsupported.
    """
    suffix = Path(file_path).suffix.lower()
    return EXTENSION_TO_LANGUAGE.get(suffix)
