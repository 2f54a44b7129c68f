"""
PMD Review FastAPI Application.

Exposes the PMD review adapter to the review pipeline:
  POST /review → run PMD over candidate files, return canonical violations
  GET  /health → {"status": "ok"}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pmd_review.api.routes.health import router as health_router
from pmd_review.api.routes.review import router as review_router
from pmd_review.errors import AnalysisFailure, MissingFileError, UnsupportedPriorityError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("pmd_review")

app = FastAPI(
    title="PMD Review",
    description="PMD static-analysis adapter for the code-review pipeline",
    version="1.0.0",
)

app.include_router(health_router)
app.include_router(review_router)


@app.exception_handler(MissingFileError)
async def missing_file_handler(request: Request, exc: MissingFileError):
    logger.warning(f"Review rejected: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(AnalysisFailure)
async def analysis_failure_handler(request: Request, exc: AnalysisFailure):
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(UnsupportedPriorityError)
async def unsupported_priority_handler(request: Request, exc: UnsupportedPriorityError):
    logger.error(f"PMD report conversion failed: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})
