"""
Sweeper Pattern Tables

Static configuration data, versioned with the software. Users extend these
only through the custom rule overlay.
"""

from .urls import HIGH_RISK_URL_PATTERNS, MEDIUM_RISK_URL_PATTERNS, SAFE_DOMAINS
from .keywords import SPAM_KEYWORD_WEIGHTS
from .dynamic import RegexRule, SPAM_REGEX_PATTERNS

__all__ = [
    'HIGH_RISK_URL_PATTERNS',
    'MEDIUM_RISK_URL_PATTERNS',
    'SAFE_DOMAINS',
    'SPAM_KEYWORD_WEIGHTS',
    'RegexRule',
    'SPAM_REGEX_PATTERNS',
]
