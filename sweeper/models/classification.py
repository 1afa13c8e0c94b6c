"""
Sweeper Classification Data Models

Pydantic models for classification results.
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from enum import Enum


class RiskLevel(str, Enum):
    """Risk tier, ordered by ascending suspicion."""
    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SkipReason(str, Enum):
    """Why the model overlay left the heuristic result untouched."""
    AI_DISABLED = "ai_disabled"
    ALREADY_HIGH_RISK = "already_high_risk"
    SCORE_TOO_LOW = "score_too_low"
    HIDDEN_LINK_UNRESOLVED = "hidden_link_unresolved"
    AI_UNAVAILABLE = "ai_unavailable"
    AI_TIMEOUT = "ai_timeout"
    AI_ERROR = "ai_error"


class UrlMatch(BaseModel):
    """URL pattern evaluation for one text."""
    is_spam: bool = Field(False, description="Any high or medium pattern matched")
    risk_level: RiskLevel = Field(RiskLevel.SAFE, description="URL risk tier")
    matched_patterns: List[str] = Field(default_factory=list, description="Evidence, in table order")
    has_safe_url: bool = Field(False, description="An allowlisted domain is referenced")


class KeywordHit(BaseModel):
    """Contribution of a single keyword or regex rule."""
    weight: int = Field(..., ge=1)
    count: int = Field(..., ge=1)
    contribution: int = Field(..., ge=1)
    matches: Optional[List[str]] = Field(None, description="First matched strings (regex rules only)")


class KeywordMatch(BaseModel):
    """Keyword and dynamic regex scoring for one text."""
    score: int = Field(0, ge=0, description="Unclamped sum of contributions")
    matched_keywords: Dict[str, KeywordHit] = Field(default_factory=dict)


class ModelVerdict(BaseModel):
    """Verdict returned by an external classifier."""
    is_spam: bool
    confidence: float = Field(..., ge=0.0, le=1.0)
    category: str = "Unknown"
    reason: str = ""


class ClassificationResult(BaseModel):
    """Final verdict for one message text."""
    risk_level: RiskLevel = Field(..., description="Tier derived from score")
    score: int = Field(..., ge=0, le=30, description="Clamped score 0-30")
    url_match: UrlMatch = Field(default_factory=UrlMatch)
    keyword_match: KeywordMatch = Field(default_factory=KeywordMatch)
    is_hidden_link: bool = False

    # Model overlay annotations
    ai_checked: bool = False
    ai_skipped: Optional[SkipReason] = None
    ai_verdict: Optional[ModelVerdict] = None
    ai_reason: Optional[str] = None
