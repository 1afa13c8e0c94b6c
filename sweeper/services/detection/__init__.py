"""
Sweeper Detection Module

Heuristic spam classification for short messages:
- URL pattern tiers with a safe-domain allowlist
- Weighted keyword and dynamic regex scoring
- Hidden-link penalty and safe-domain discount, clamped to 0-30
- User-defined custom rule overlay
"""

from .engine import (
    SpamDetectionEngine,
    get_detection_engine,
    classify,
    should_auto_flag,
    is_hidden_link,
)

from .tables import (
    RuleTables,
    build_tables,
    get_default_tables,
)

from .url_classifier import check_url_patterns, has_safe_domain
from .keyword_scorer import calculate_keyword_score

from .custom_rules import (
    CustomRuleStore,
    init_custom_rule_store,
    get_custom_rule_store,
)

__all__ = [
    # Engine
    'SpamDetectionEngine',
    'get_detection_engine',
    'classify',
    'should_auto_flag',
    'is_hidden_link',

    # Tables
    'RuleTables',
    'build_tables',
    'get_default_tables',

    # Scorers
    'check_url_patterns',
    'has_safe_domain',
    'calculate_keyword_score',

    # Custom rules
    'CustomRuleStore',
    'init_custom_rule_store',
    'get_custom_rule_store',
]
