"""
Sweeper Classification API Routes

Endpoints for scoring message texts.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from sweeper.api.dependencies import get_engine, get_overlay
from sweeper.models.classification import ClassificationResult, RiskLevel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/classify", tags=["classify"])

MAX_BATCH_SIZE = 500


# Request/Response Models

class ClassifyRequest(BaseModel):
    """Request to classify one message."""
    text: Optional[str] = Field(None, description="Message text; empty or missing is SAFE")
    use_model: bool = Field(False, description="Let the model overlay review ambiguous results")


class BatchClassifyRequest(BaseModel):
    """Request to classify many messages."""
    texts: List[Optional[str]] = Field(..., max_length=MAX_BATCH_SIZE)
    use_model: bool = False


class BatchClassifyResponse(BaseModel):
    """Batch results, in request order."""
    total: int
    high_risk: int
    results: List[ClassificationResult]


class AutoFlagResponse(BaseModel):
    """Auto-flag decision for one message."""
    auto_flag: bool
    risk_level: RiskLevel
    score: int


# Endpoints

@router.post("", response_model=ClassificationResult)
async def classify_text(
    request: ClassifyRequest,
    engine=Depends(get_engine),
    overlay=Depends(get_overlay),
):
    """
    Classify a single message text.

    With use_model the overlay may replace the heuristic score when the
    model is confident; it never makes the call fail.
    """
    if request.use_model:
        return await engine.classify_with_model(request.text, overlay)
    return engine.classify(request.text)


@router.post("/batch", response_model=BatchClassifyResponse)
async def classify_batch(
    request: BatchClassifyRequest,
    engine=Depends(get_engine),
    overlay=Depends(get_overlay),
):
    """Classify many message texts."""
    if request.use_model:
        results = [await engine.classify_with_model(text, overlay) for text in request.texts]
    else:
        results = engine.classify_batch(request.texts)

    high_risk = sum(1 for r in results if r.risk_level == RiskLevel.HIGH)
    logger.info(f"Classified batch of {len(results)} texts ({high_risk} high risk)")

    return BatchClassifyResponse(
        total=len(results),
        high_risk=high_risk,
        results=results,
    )


@router.get("/auto-flag", response_model=AutoFlagResponse)
async def auto_flag(
    text: str = Query("", description="Message text"),
    engine=Depends(get_engine),
):
    """Check whether a message is HIGH risk and may be flagged automatically."""
    result = engine.classify(text)
    return AutoFlagResponse(
        auto_flag=result.risk_level == RiskLevel.HIGH,
        risk_level=result.risk_level,
        score=result.score,
    )
