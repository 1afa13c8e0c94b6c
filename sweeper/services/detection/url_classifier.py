"""
Sweeper URL Classifier

Scans a message against the URL pattern tables and the safe-domain allowlist.
High-risk and custom patterns win outright; medium-risk patterns are only
checked when nothing high-risk matched.
"""

import logging
from typing import List, Optional

from sweeper.models.classification import RiskLevel, UrlMatch
from .tables import RuleTables, CUSTOM_PREFIX

logger = logging.getLogger(__name__)


def has_safe_domain(text: Optional[str], tables: RuleTables) -> bool:
    """Check if the text references any allowlisted domain."""
    if not text:
        return False
    lower_text = text.lower()
    return any(domain in lower_text for domain in tables.safe_domains)


def check_url_patterns(text: Optional[str], tables: RuleTables) -> UrlMatch:
    """
    Classify the URLs referenced in a message.

    Args:
        text: Raw message text (may be empty or None)
        tables: Rule table snapshot, custom URL patterns included

    Returns:
        UrlMatch with tier, evidence and the safe-domain flag
    """
    if not text:
        return UrlMatch()

    lower_text = text.lower()
    matched: List[str] = []

    safe = has_safe_domain(text, tables)

    for pattern in tables.high_risk_urls:
        if pattern.regex.search(text):
            matched.append(pattern.source)

    for custom in tables.custom_url_patterns:
        if custom.lower() in lower_text:
            matched.append(f"{CUSTOM_PREFIX}{custom}")

    if matched:
        return UrlMatch(
            is_spam=True,
            risk_level=RiskLevel.HIGH,
            matched_patterns=matched,
            has_safe_url=safe,
        )

    for pattern in tables.medium_risk_urls:
        if pattern.regex.search(text):
            matched.append(pattern.source)

    if matched:
        # Shortener next to a known platform link: still flagged, but LOW
        return UrlMatch(
            is_spam=True,
            risk_level=RiskLevel.LOW if safe else RiskLevel.MEDIUM,
            matched_patterns=matched,
            has_safe_url=safe,
        )

    return UrlMatch(has_safe_url=safe)
