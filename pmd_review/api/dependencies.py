"""
FastAPI Dependencies — Settings and processor injected via Depends().
"""

from __future__ import annotations

from fastapi import Depends

from pmd_review.config import Settings, get_settings
from pmd_review.core.processor import PmdProcessor


def get_processor(settings: Settings = Depends(get_settings)) -> PmdProcessor:
    """A processor bound to the current settings. Processors hold no run state."""
    return PmdProcessor(settings)
