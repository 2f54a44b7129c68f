"""
Review Route — POST /review

Runs the PMD adapter over the files of a review and returns its
contribution for the pipeline's aggregator. ``result`` is null when none of
the files are PMD-relevant.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from pmd_review.api.dependencies import get_processor
from pmd_review.core.processor import PmdProcessor
from pmd_review.models.review_models import Review, ReviewResult

logger = logging.getLogger("pmd_review.api.review")

router = APIRouter()


class ReviewRequest(BaseModel):
    files: list[str] = Field(default_factory=list, description="Candidate file paths, in review order")


class ReviewResponse(BaseModel):
    source: str
    result: ReviewResult | None = None


@router.post("/review", response_model=ReviewResponse)
def review_files(
    request: ReviewRequest,
    processor: PmdProcessor = Depends(get_processor),
):
    """Run PMD over the candidate files. Errors are mapped by the app's exception handlers."""
    logger.info(f"Reviewing {len(request.files)} candidate files")
    result = processor.process(Review.from_paths(request.files))
    if result is None:
        logger.info("No files selected for PMD")
    else:
        logger.info(f"PMD reported {len(result)} violations")
    return ReviewResponse(source=processor.name, result=result)
