"""
Sweeper Detection Engine

Combines URL tier bonuses, keyword score, the hidden-link penalty and the
safe-domain discount into one clamped 0-30 score, then maps it to a tier.

The engine holds a reference to an immutable RuleTables snapshot. Loading
custom rules builds a new snapshot and swaps the reference, so a
classification running during a reload sees either the old or the new
rules, never a half-built table.
"""

import re
import logging
import threading
from typing import Optional, Dict, Any, List, TYPE_CHECKING

from sweeper.config.scoring import (
    ScoringConfig,
    get_scoring_config,
    clamp_score,
    calculate_risk_level,
)
from sweeper.models.classification import ClassificationResult, RiskLevel
from sweeper.models.rules import CustomRuleSet
from .tables import RuleTables, get_default_tables
from .url_classifier import check_url_patterns
from .keyword_scorer import calculate_keyword_score

if TYPE_CHECKING:
    from sweeper.services.ai.overlay import ModelOverlay

logger = logging.getLogger(__name__)

# Platform placeholder shown instead of an un-rendered link
HIDDEN_LINK_REGEX = re.compile(r"sent a link", re.IGNORECASE)


def is_hidden_link(text: Optional[str]) -> bool:
    """Exact (trimmed, case-insensitive) match of the hidden-link placeholder."""
    if not text:
        return False
    return HIDDEN_LINK_REGEX.fullmatch(text.strip()) is not None


class SpamDetectionEngine:
    """
    Heuristic spam classifier.

    Pure per call: the result depends only on the text and the table
    snapshot current when the call started.
    """

    def __init__(
        self,
        tables: Optional[RuleTables] = None,
        custom_rules: Optional[CustomRuleSet] = None,
        scoring: Optional[ScoringConfig] = None,
    ):
        """
        Initialize detection engine.

        Args:
            tables: Static table snapshot (defaults to the shipped tables)
            custom_rules: Initial custom overlay
            scoring: Calibration constants (defaults to get_scoring_config())
        """
        base = tables or get_default_tables()
        self._tables = base.with_custom_rules(custom_rules) if custom_rules else base
        self.scoring = scoring or get_scoring_config()
        self._reload_lock = threading.Lock()

    @property
    def tables(self) -> RuleTables:
        """Current table snapshot."""
        return self._tables

    def load_custom_rules(self, rules: Optional[CustomRuleSet]) -> RuleTables:
        """
        Replace the custom overlay.

        Reloads are serialized; the new snapshot is fully built before the
        reference is swapped.
        """
        with self._reload_lock:
            new_tables = self._tables.with_custom_rules(rules)
            self._tables = new_tables

        logger.info(
            f"Loaded custom rules: {len(new_tables.custom_url_patterns)} URLs, "
            f"{len(new_tables.custom_keywords)} keywords"
        )
        return new_tables

    def classify(self, text: Optional[str]) -> ClassificationResult:
        """
        Classify a single message text.

        Args:
            text: Message text (None and "" are the SAFE zero case)

        Returns:
            ClassificationResult with tier, score and evidence
        """
        tables = self._tables
        adjustments = self.scoring.adjustments

        hidden = is_hidden_link(text)
        url_match = check_url_patterns(text, tables)
        keyword_match = calculate_keyword_score(text, tables)

        total = keyword_match.score

        if hidden:
            # Unknown destination: suspicious by default, never HIGH on its own
            total += adjustments.hidden_link

        if url_match.risk_level == RiskLevel.HIGH:
            total += adjustments.high_risk_url
        elif url_match.risk_level == RiskLevel.MEDIUM:
            total += adjustments.medium_risk_url

        if url_match.has_safe_url:
            total -= adjustments.safe_domain_discount

        score = clamp_score(total, self.scoring)
        risk_level = calculate_risk_level(score, self.scoring)

        logger.debug(
            f"Classified text: score={score} (raw={total}), level={risk_level.value}, "
            f"url={url_match.risk_level.value}, keywords={len(keyword_match.matched_keywords)}"
        )

        return ClassificationResult(
            risk_level=risk_level,
            score=score,
            url_match=url_match,
            keyword_match=keyword_match,
            is_hidden_link=hidden,
        )

    def classify_batch(self, texts: List[Optional[str]]) -> List[ClassificationResult]:
        """Classify many texts; order is preserved."""
        return [self.classify(text) for text in texts]

    def should_auto_flag(self, text: Optional[str]) -> bool:
        """Check if a message is eligible for automatic flagging."""
        return self.classify(text).risk_level == RiskLevel.HIGH

    async def classify_with_model(
        self,
        text: Optional[str],
        overlay: Optional["ModelOverlay"] = None,
    ) -> ClassificationResult:
        """
        Classify heuristically, then let the model overlay review the result.

        Without an overlay this is the plain heuristic result.
        """
        result = self.classify(text)
        if overlay is None:
            return result
        return await overlay.maybe_consult_model(text, result)

    def get_rule_summary(self) -> Dict[str, Any]:
        """Summary of loaded tables and calibration."""
        thresholds = self.scoring.thresholds
        return {
            'tables': self._tables.summary(),
            'thresholds': {
                'high': thresholds.high,
                'medium': thresholds.medium,
                'low': thresholds.low,
            },
            'max_score': self.scoring.adjustments.max_score,
        }


# Singleton instance
_detection_engine: Optional[SpamDetectionEngine] = None


def get_detection_engine() -> SpamDetectionEngine:
    """Get the detection engine singleton."""
    global _detection_engine
    if _detection_engine is None:
        _detection_engine = SpamDetectionEngine()
    return _detection_engine


def classify(text: Optional[str]) -> ClassificationResult:
    """Convenience function to classify with the singleton engine."""
    return get_detection_engine().classify(text)


def should_auto_flag(text: Optional[str]) -> bool:
    """Convenience function: is this text HIGH risk?"""
    return get_detection_engine().should_auto_flag(text)
