"""
Sweeper Model Overlay

Confidence-gated second opinion for messages in the ambiguous middle band.

The model is consulted only when the heuristic tier is not HIGH, the score
is at least the gate minimum and the text is not an unresolved hidden link.
A confident verdict overrides the score; anything else keeps the heuristic
result. Failures never reach the caller.
"""

import asyncio
import logging
from typing import Optional

from sweeper.config.scoring import ScoringConfig, get_scoring_config
from sweeper.models.classification import (
    ClassificationResult,
    ModelVerdict,
    RiskLevel,
    SkipReason,
)
from .base import (
    BaseModelProvider,
    ModelProviderError,
    ModelResponseParseError,
    ModelTimeoutError,
)

logger = logging.getLogger(__name__)


class ModelOverlay:
    """Applies a model verdict on top of a heuristic classification."""

    def __init__(
        self,
        provider: Optional[BaseModelProvider] = None,
        timeout: float = 3.0,
        scoring: Optional[ScoringConfig] = None,
    ):
        """
        Initialize overlay.

        Args:
            provider: Model provider, None when the overlay is disabled
            timeout: Upper bound on one model call, in seconds
            scoring: Calibration constants
        """
        self.provider = provider
        self.timeout = timeout
        self.scoring = scoring or get_scoring_config()

    def is_enabled(self) -> bool:
        return self.provider is not None

    def gate(self, result: ClassificationResult) -> Optional[SkipReason]:
        """Return why the model should be skipped, or None to consult it."""
        if self.provider is None:
            return SkipReason.AI_DISABLED
        if result.risk_level == RiskLevel.HIGH:
            return SkipReason.ALREADY_HIGH_RISK
        if result.score < self.scoring.model_gate.min_score:
            return SkipReason.SCORE_TOO_LOW
        if result.is_hidden_link:
            return SkipReason.HIDDEN_LINK_UNRESOLVED
        return None

    async def maybe_consult_model(
        self,
        text: Optional[str],
        result: ClassificationResult,
    ) -> ClassificationResult:
        """
        Consult the model for ambiguous results.

        Args:
            text: Original message text
            result: Heuristic classification of that text

        Returns:
            A new ClassificationResult; the input is never modified
        """
        skip = self.gate(result)
        if skip is not None:
            return result.model_copy(update={"ai_skipped": skip})

        checked = result.model_copy(update={"ai_checked": True})

        try:
            verdict = await asyncio.wait_for(self.provider.scan(text), timeout=self.timeout)
        except (asyncio.TimeoutError, ModelTimeoutError):
            logger.warning(f"Model check timed out after {self.timeout}s, keeping heuristic score")
            return checked.model_copy(update={"ai_skipped": SkipReason.AI_TIMEOUT})
        except ModelResponseParseError as e:
            # No usable verdict, same as no verdict at all
            logger.warning(f"Model reply unusable: {e}")
            return checked.model_copy(update={"ai_skipped": SkipReason.AI_UNAVAILABLE})
        except ModelProviderError as e:
            logger.warning(f"Model check failed: {e}")
            return checked.model_copy(update={"ai_skipped": SkipReason.AI_ERROR})
        except Exception as e:
            logger.warning(f"Model check failed unexpectedly: {e}")
            return checked.model_copy(update={"ai_skipped": SkipReason.AI_ERROR})

        if verdict is None:
            return checked.model_copy(update={"ai_skipped": SkipReason.AI_UNAVAILABLE})

        if not isinstance(verdict, ModelVerdict):
            logger.warning(f"Model returned malformed verdict: {verdict!r}")
            return checked.model_copy(update={"ai_skipped": SkipReason.AI_ERROR})

        return self.apply_verdict(checked, verdict)

    def apply_verdict(self, result: ClassificationResult, verdict: ModelVerdict) -> ClassificationResult:
        """Override score and tier when the verdict is confident enough."""
        gate = self.scoring.model_gate
        update = {"ai_verdict": verdict}

        if verdict.confidence > gate.confidence:
            if verdict.is_spam:
                logger.info(
                    f"Model upgraded score from {result.score} to HIGH "
                    f"({verdict.category}: {verdict.reason})"
                )
                update.update(
                    score=gate.upgrade_score,
                    risk_level=RiskLevel.HIGH,
                    ai_reason=f"AI: {verdict.category} - {verdict.reason}",
                )
            else:
                logger.info(f"Model downgraded score from {result.score} to SAFE ({verdict.reason})")
                update.update(
                    score=gate.downgrade_score,
                    risk_level=RiskLevel.SAFE,
                    ai_reason=f"AI cleared: {verdict.reason}",
                )
        else:
            logger.debug(
                f"Model uncertain (confidence: {verdict.confidence}), "
                f"keeping heuristic score {result.score}"
            )

        return result.model_copy(update=update)


# Singleton instance
_model_overlay: Optional[ModelOverlay] = None


def init_model_overlay(settings) -> ModelOverlay:
    """
    Build the overlay from application settings.

    With ai_enabled off the overlay has no provider and every call is
    skipped with ai_disabled.
    """
    global _model_overlay

    provider = None
    if settings.ai_enabled:
        from . import create_provider

        provider = create_provider(
            settings.ai_provider,
            base_url=settings.ai_base_url,
            model=settings.ai_model,
            timeout=settings.ai_timeout_seconds,
        )
        logger.info(f"Model overlay enabled: {provider.provider_name} ({provider.model})")
    else:
        logger.info("Model overlay disabled")

    _model_overlay = ModelOverlay(provider=provider, timeout=settings.ai_timeout_seconds)
    return _model_overlay


def get_model_overlay() -> ModelOverlay:
    """Get the overlay singleton (disabled until init_model_overlay runs)."""
    global _model_overlay
    if _model_overlay is None:
        _model_overlay = ModelOverlay()
    return _model_overlay
