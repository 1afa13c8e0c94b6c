"""
Sweeper Scoring Configuration

All calibration constants for the heuristic score and the model overlay
are centralized here. The scale runs from 0 to 30.

Usage:
    from sweeper.config.scoring import get_scoring_config
    config = get_scoring_config()

    if score >= config.thresholds.high:
        level = "high"
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from sweeper.models.classification import RiskLevel

logger = logging.getLogger(__name__)


# =============================================================================
# RISK LEVEL THRESHOLDS
# =============================================================================

@dataclass(frozen=True)
class RiskThresholds:
    """Thresholds for risk level classification."""

    high: int = 20      # >= this = HIGH (red badge)
    medium: int = 10    # >= this = MEDIUM (yellow badge)
    low: int = 3        # >= this = LOW (grey badge)
    # Below low = SAFE


# =============================================================================
# SCORE ADJUSTMENTS
# =============================================================================

@dataclass(frozen=True)
class ScoreAdjustments:
    """Flat bonuses and discounts applied on top of the keyword score."""

    hidden_link: int = 10           # "sent a link" placeholder
    high_risk_url: int = 20         # off-platform redirect
    medium_risk_url: int = 10       # shorteners, invite links
    safe_domain_discount: int = 10  # applied once, however many safe domains

    min_score: int = 0
    max_score: int = 30


# =============================================================================
# MODEL OVERLAY GATE
# =============================================================================

@dataclass(frozen=True)
class ModelGate:
    """When the model is consulted and how its verdict is applied."""

    min_score: int = 5              # below this, not worth a model call
    confidence: float = 0.8         # verdict must be strictly above this
    upgrade_score: int = 25         # spam verdict -> HIGH
    downgrade_score: int = 0        # not-spam verdict -> SAFE


@dataclass(frozen=True)
class ScoringConfig:
    """Complete scoring configuration."""

    thresholds: RiskThresholds = field(default_factory=RiskThresholds)
    adjustments: ScoreAdjustments = field(default_factory=ScoreAdjustments)
    model_gate: ModelGate = field(default_factory=ModelGate)


_scoring_config: Optional[ScoringConfig] = None


def get_scoring_config() -> ScoringConfig:
    """Get the scoring configuration singleton."""
    global _scoring_config
    if _scoring_config is None:
        _scoring_config = ScoringConfig()
    return _scoring_config


def clamp_score(score: int, config: Optional[ScoringConfig] = None) -> int:
    """Clamp a raw score into the closed scoring interval."""
    adjustments = (config or get_scoring_config()).adjustments
    return min(max(score, adjustments.min_score), adjustments.max_score)


def calculate_risk_level(score: int, config: Optional[ScoringConfig] = None) -> RiskLevel:
    """Map a clamped score to its risk level."""
    thresholds = (config or get_scoring_config()).thresholds

    if score >= thresholds.high:
        return RiskLevel.HIGH
    elif score >= thresholds.medium:
        return RiskLevel.MEDIUM
    elif score >= thresholds.low:
        return RiskLevel.LOW
    return RiskLevel.SAFE
