"""
Collate utility modules.

This package provides shared utilities used across the Collate codebase:
- Logging (stderr-only, loguru)
- File kind detection
- Subprocess helpers
"""

# Logger
from .logger import (
    configure_logging,
    is_debug_enabled,
    logger,
)

# Language Registry
from .language_registry import (
    EXTENSION_TO_LANGUAGE,
    LANGUAGES,
    FileKind,
    LanguageInfo,
    detect_language,
)

# Subprocess
from .subprocess_util import format_command, subprocess_kwargs

__all__ = [
    # Logger
    "configure_logging",
    "is_debug_enabled",
    "logger",
    # Language Registry
    "EXTENSION_TO_LANGUAGE",
    "LANGUAGES",
    "FileKind",
    "LanguageInfo",
    "detect_language",
    # Subprocess
    "format_command",
    "subprocess_kwargs",
]
