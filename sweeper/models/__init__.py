"""
Sweeper Data Models
"""

from .classification import (
    RiskLevel,
    SkipReason,
    UrlMatch,
    KeywordHit,
    KeywordMatch,
    ModelVerdict,
    ClassificationResult,
)
from .rules import (
    CustomRuleSet,
    UrlPatternCreate,
    UrlPatternUpdate,
    KeywordCreate,
    KeywordUpdate,
)

__all__ = [
    'RiskLevel',
    'SkipReason',
    'UrlMatch',
    'KeywordHit',
    'KeywordMatch',
    'ModelVerdict',
    'ClassificationResult',
    'CustomRuleSet',
    'UrlPatternCreate',
    'UrlPatternUpdate',
    'KeywordCreate',
    'KeywordUpdate',
]
