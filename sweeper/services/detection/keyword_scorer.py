"""
Sweeper Keyword Scorer

Sums weighted matches of literal keywords, dynamic regex rules and custom
keywords. Contributions are additive and independent; the evidence map is
filled in table order (static keywords, regex rules, custom keywords).
"""

import logging
from typing import Dict, Optional

from sweeper.models.classification import KeywordHit, KeywordMatch
from .tables import RuleTables, CompiledKeyword, CUSTOM_PREFIX

logger = logging.getLogger(__name__)

MAX_REGEX_SAMPLES = 3


def _score_rule(rule: CompiledKeyword, text: str, hits: Dict[str, KeywordHit]) -> int:
    matches = [m.group(0) for m in rule.regex.finditer(text)]
    if not matches:
        return 0

    contribution = rule.weight * len(matches)
    hits[rule.key] = KeywordHit(
        weight=rule.weight,
        count=len(matches),
        contribution=contribution,
        matches=matches[:MAX_REGEX_SAMPLES] if rule.keep_samples else None,
    )
    return contribution


def calculate_keyword_score(text: Optional[str], tables: RuleTables) -> KeywordMatch:
    """
    Score message text against the keyword tables.

    Literal keywords are matched on the lower-cased text; regex rules run on
    the original text with their own flags.

    Args:
        text: Raw message text (may be empty or None)
        tables: Rule table snapshot

    Returns:
        KeywordMatch with the unclamped score and per-rule evidence
    """
    if not text:
        return KeywordMatch()

    lower_text = text.lower()
    hits: Dict[str, KeywordHit] = {}
    score = 0

    for rule in tables.keywords:
        score += _score_rule(rule, lower_text, hits)

    for rule in tables.regex_rules:
        score += _score_rule(rule, text, hits)

    for rule in tables.custom_keywords:
        score += _score_rule(rule, lower_text, hits)

    if tables.custom_keywords:
        logger.debug(
            f"Custom keywords checked: {len(tables.custom_keywords)}, "
            f"matched: {[k for k in hits if k.startswith(CUSTOM_PREFIX)]}"
        )

    return KeywordMatch(score=score, matched_keywords=hits)
