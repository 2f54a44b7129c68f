"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter

from pmd_review.core.processor import SOURCE_NAME

router = APIRouter()


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "source": SOURCE_NAME,
        "version": "1.0.0",
    }
