"""Run configuration.

A CollateConfig is built once per invocation (from CLI options, which
fall back to COLLATE_* environment variables) and shared read-only by
every file processed in the run.
"""

from __future__ import annotations

from dataclasses import dataclass

from collate.constants import DEFAULT_JOBS, DEFAULT_THRESHOLD
from collate.types.errors import ConfigurationError, ErrorContext, RecoveryAction


@dataclass(frozen=True)
class CollateConfig:
    """Settings shared across all files of a run."""

    threshold: float = DEFAULT_THRESHOLD
    jobs: int = DEFAULT_JOBS
    verbose: bool = False

    def __post_init__(self) -> None:
        if not 0.0 < self.threshold < 1.0:
            raise ConfigurationError(
                f"threshold must be in the open interval (0, 1), got {self.threshold}",
                user_message="Invalid contribution threshold.",
                context=ErrorContext(
                    operation="configure",
                    additional_info={"threshold": self.threshold},
                ),
                recovery_actions=[
                    RecoveryAction(
                        description="Pass a value strictly between 0 and 1",
                        command="collate ROOT AUTHOR --threshold 0.5",
                    )
                ],
            )
        if self.jobs < 1:
            raise ConfigurationError(
                f"jobs must be at least 1, got {self.jobs}",
                user_message="Invalid number of parallel jobs.",
                context=ErrorContext(
                    operation="configure",
                    additional_info={"jobs": self.jobs},
                ),
            )
