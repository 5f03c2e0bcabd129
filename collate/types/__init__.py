"""
Collate type definitions.

This module exports the line model and the error hierarchy.
"""

# Core types
from .core import LineRange, line_from_row, split_lines

# Error types
from .errors import (
    CollateError,
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    HistoryUnavailableError,
    InconsistentLineCountError,
    InvariantViolationError,
    RecoveryAction,
    StructuralParseError,
)

__all__ = [
    # Core types
    "LineRange",
    "line_from_row",
    "split_lines",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "RecoveryAction",
    "ErrorContext",
    "CollateError",
    "ConfigurationError",
    "HistoryUnavailableError",
    "InconsistentLineCountError",
    "InvariantViolationError",
    "StructuralParseError",
]
