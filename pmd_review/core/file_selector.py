"""
File Selector — Narrows the review's candidate files to what PMD inspects.

Selection is all-or-nothing: a selected file that is missing on disk fails
the whole invocation before PMD is started.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

from pmd_review.errors import MissingFileError
from pmd_review.models.review_models import ReviewFile

PMD_EXTENSIONS = ("java",)


def extension_filter(*extensions: str) -> Callable[[ReviewFile], bool]:
    """Build a predicate accepting files whose extension is one of ``extensions``."""
    suffixes = tuple(f".{ext.lstrip('.').lower()}" for ext in extensions)

    def _accepts(review_file: ReviewFile) -> bool:
        return review_file.review_filename.lower().endswith(suffixes)

    return _accepts


PMD_FILTER = extension_filter(*PMD_EXTENSIONS)


def select(
    candidates: Iterable[str],
    predicate: Callable[[str], bool] | None = None,
) -> list[Path]:
    """
    Filter and resolve candidate file names.

    Args:
        candidates: File names in pipeline order.
        predicate: Optional filter over file names; all names kept when None.

    Returns:
        Paths of the selected files, in order. Empty when nothing was selected.

    Raises:
        MissingFileError: if a selected file does not exist.
    """
    selected: list[Path] = []
    for name in candidates:
        if predicate is not None and not predicate(name):
            continue
        path = Path(name)
        if not path.exists():
            raise MissingFileError(name)
        selected.append(path)
    return selected
