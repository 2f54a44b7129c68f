"""
Review Data Models — Review input, canonical violations and results.

These are the analyzer-agnostic records the surrounding review pipeline
consumes. Every adapter in the pipeline produces the same Violation shape.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    IGNORE = "ignore"

    @property
    def rank(self) -> int:
        """Importance ranking, higher is more important."""
        return SEVERITY_RANKS[self]

    # Compare by importance, not by the string values
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


SEVERITY_RANKS: dict[Severity, int] = {
    Severity.ERROR: 3,
    Severity.WARNING: 2,
    Severity.INFO: 1,
    Severity.IGNORE: 0,
}

# Most important first
SEVERITY_ORDER: tuple[Severity, ...] = (
    Severity.ERROR,
    Severity.WARNING,
    Severity.INFO,
    Severity.IGNORE,
)


class Violation(BaseModel):
    """A single canonical violation reported by an adapter."""

    filename: str = Field(..., description="File path exactly as supplied by the pipeline")
    line: int = Field(..., description="1-based line number of the violation")
    message: str = Field(..., description="Rendered human-readable message")
    severity: Severity

    model_config = {"frozen": True}


class ReviewResult(BaseModel):
    """Accumulated violations from one adapter invocation."""

    violations: list[Violation] = Field(default_factory=list)

    def add(self, violation: Violation) -> None:
        self.violations.append(violation)

    def count_by_severity(self) -> dict[Severity, int]:
        counts = {severity: 0 for severity in SEVERITY_ORDER}
        for violation in self.violations:
            counts[violation.severity] += 1
        return counts

    def __len__(self) -> int:
        return len(self.violations)


class ReviewFile(BaseModel):
    """A file taking part in the review."""

    review_filename: str = Field(..., description="Path of the file in the reviewed workspace")


FileFilter = Callable[[ReviewFile], bool]
FileTransformer = Callable[[ReviewFile], str]


def review_filename(review_file: ReviewFile) -> str:
    """Default transformer: the file's review path."""
    return review_file.review_filename


class Review(BaseModel):
    """The set of files under review, supplied by the pipeline."""

    files: list[ReviewFile] = Field(default_factory=list)

    @classmethod
    def from_paths(cls, paths: list[str]) -> Review:
        return cls(files=[ReviewFile(review_filename=p) for p in paths])

    def get_files(
        self,
        file_filter: FileFilter,
        transformer: FileTransformer = review_filename,
    ) -> list[str]:
        """Return transformed names of the files accepted by ``file_filter``, in order."""
        return [transformer(f) for f in self.files if file_filter(f)]
