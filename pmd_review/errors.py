"""
Review Errors — Failures an adapter reports to the review pipeline.

All of them are terminal for the adapter's contribution: a failing adapter
contributes nothing rather than a truncated violation list.
"""

from __future__ import annotations


class ReviewError(Exception):
    """Base class for adapter failures surfaced to the pipeline."""


class MissingFileError(ReviewError):
    """A selected file does not exist on disk."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"File [{filename}] does not exist")
        self.filename = filename


class AnalysisFailure(ReviewError):
    """The external analyzer failed during configuration or execution."""


class UnsupportedPriorityError(ReviewError, ValueError):
    """The analyzer reported a priority outside the known mapping."""

    def __init__(self, priority: object) -> None:
        super().__init__(f"RulePriority {priority} is not supported")
        self.priority = priority


class PmdExecutionError(RuntimeError):
    """The PMD process failed or produced no usable report."""

    def __init__(self, message: str, exit_code: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr
