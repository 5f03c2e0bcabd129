"""
Structured error handling for Collate.

Every fatal condition in a run is a CollateError carrying a code, a
user-facing message, and the file/operation context it happened in.
The CLI prints get_formatted_message() and exits non-zero.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from collate.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # History/authorship errors (1000-1999)
    HISTORY_UNAVAILABLE = 1001
    LINE_COUNT_MISMATCH = 1002

    # File System Errors (2000-2999)
    FILE_READ_FAILED = 2002

    # Parsing/Analysis Errors (3000-3999)
    PARSE_FAILED = 3002
    INTERNAL_INVARIANT = 3099

    # Configuration Errors (4000-4999)
    INVALID_CONFIG = 4001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class RecoveryAction:
    """Suggested action to recover from an error."""

    description: str
    command: str | None = None


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    file_path: str | None = None
    component: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class CollateError(Exception):
    """Base error class for Collate."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.recovery_actions = recovery_actions or []
        self.original_error = original_error

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
            f"   Detail: {self}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.file_path:
            parts.append(f"   File: {self.context.file_path}")
        if self.context.component:
            parts.append(f"   Component: {self.context.component}")

        if self.recovery_actions:
            parts.append("")
            parts.append("Suggested actions:")
            for i, action in enumerate(self.recovery_actions, 1):
                parts.append(f"   {i}. {action.description}")
                if action.command:
                    parts.append(f"      Run: {action.command}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "file_path": self.context.file_path,
                "component": self.context.component,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "recovery_actions": [
                {"description": a.description, "command": a.command}
                for a in self.recovery_actions
            ],
            "original_error": str(self.original_error) if self.original_error else None,
        }


# Specialized error classes for domain-specific error handling
class HistoryUnavailableError(CollateError):
    """The authorship mechanism could not run or produced unusable output."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.HISTORY_UNAVAILABLE,
            message=message,
            user_message="Line history is unavailable for a file.",
            severity=ErrorSeverity.CRITICAL,
            context=ErrorContext(
                operation="line_authors",
                file_path=file_path,
                component="authorship",
            ),
            recovery_actions=[
                RecoveryAction(
                    description="Make sure the file is committed in a git repository",
                    command=f"git log -- {file_path}" if file_path else None,
                ),
            ],
            original_error=original_error,
        )


class InconsistentLineCountError(CollateError):
    """The authorship table disagrees with the physical line count."""

    def __init__(self, file_path: str, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            code=ErrorCode.LINE_COUNT_MISMATCH,
            message=(
                f"authorship covers {actual} lines but the file has {expected}"
            ),
            user_message="Line history does not match the file contents.",
            severity=ErrorSeverity.CRITICAL,
            context=ErrorContext(
                operation="resolve_authorship",
                file_path=file_path,
                component="authorship",
                additional_info={"expected": expected, "actual": actual},
            ),
            recovery_actions=[
                RecoveryAction(
                    description="Commit or stash uncommitted edits to the file",
                    command="git status",
                ),
            ],
        )


class StructuralParseError(CollateError):
    """The structural source could not build a tree for a file."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.PARSE_FAILED,
            message=message,
            user_message="Failed to parse the structure of a source file.",
            severity=ErrorSeverity.HIGH,
            context=ErrorContext(
                operation="parse_types",
                file_path=file_path,
                component="segmentation",
            ),
            original_error=original_error,
        )


class InvariantViolationError(CollateError):
    """An internal line-range invariant was broken."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        super().__init__(
            code=ErrorCode.INTERNAL_INVARIANT,
            message=message,
            user_message="Internal error while computing contributions.",
            severity=ErrorSeverity.CRITICAL,
            context=ErrorContext(file_path=file_path, component="segmentation"),
        )


class ConfigurationError(CollateError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration error occurred.",
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=recovery_actions,
        )
