"""
Sweeper Utilities
"""

from .exceptions import (
    SweeperBaseException,
    ValidationError,
    InvalidUrlPatternError,
    InvalidKeywordError,
    RuleConflictError,
    RuleNotFoundError,
    RuleStorageError,
)
from .validators import (
    is_valid_domain_or_url,
    normalize_url_pattern,
    normalize_keyword,
    clamp_weight,
)

__all__ = [
    'SweeperBaseException',
    'ValidationError',
    'InvalidUrlPatternError',
    'InvalidKeywordError',
    'RuleConflictError',
    'RuleNotFoundError',
    'RuleStorageError',
    'is_valid_domain_or_url',
    'normalize_url_pattern',
    'normalize_keyword',
    'clamp_weight',
]
