"""
Sweeper Input Validators

Write-time validation for custom URL patterns and keywords.
The detection engine assumes every custom entry has passed through here.
"""

import re

from .exceptions import InvalidUrlPatternError, InvalidKeywordError


# ============================================================================
# Regular Expression Patterns
# ============================================================================

# Bare domain: subdomains, name, TLD
DOMAIN_REGEX = re.compile(
    r'^([a-z0-9]([a-z0-9-]*[a-z0-9])?\.)+[a-z]{2,}$',
    re.IGNORECASE
)

# Optional scheme, domain, optional path
URL_REGEX = re.compile(
    r'^(https?://)?([a-z0-9]([a-z0-9-]*[a-z0-9])?\.)+[a-z]{2,}(/\S*)?$',
    re.IGNORECASE
)

MIN_KEYWORD_WEIGHT = 1
MAX_KEYWORD_WEIGHT = 10
DEFAULT_KEYWORD_WEIGHT = 3


def is_valid_domain_or_url(value: str) -> bool:
    """Check whether value looks like a domain (spam.com) or URL."""
    return bool(DOMAIN_REGEX.match(value) or URL_REGEX.match(value))


def normalize_url_pattern(value: str) -> str:
    """
    Normalize and validate a custom URL pattern.

    Args:
        value: Raw user input

    Returns:
        Trimmed, lower-cased pattern

    Raises:
        InvalidUrlPatternError: If the pattern is not a domain or URL
    """
    pattern = (value or "").strip().lower()
    if not pattern:
        raise InvalidUrlPatternError("URL pattern must not be empty")
    if not is_valid_domain_or_url(pattern):
        raise InvalidUrlPatternError(
            f"Enter a valid domain (e.g. spam.com) or URL, got '{pattern}'"
        )
    return pattern


def normalize_keyword(value: str) -> str:
    """
    Normalize and validate a custom keyword or phrase.

    Raises:
        InvalidKeywordError: If the keyword is empty
    """
    keyword = (value or "").strip().lower()
    if not keyword:
        raise InvalidKeywordError("Keyword must not be empty")
    return keyword


def clamp_weight(weight, default: int = DEFAULT_KEYWORD_WEIGHT) -> int:
    """
    Clamp a keyword weight into [1, 10].

    Zero and unparsable input fall back to default before clamping, the same
    way the settings page treats an empty weight box.
    """
    try:
        value = int(weight)
    except (TypeError, ValueError):
        value = default
    if value == 0:
        value = default
    return min(MAX_KEYWORD_WEIGHT, max(MIN_KEYWORD_WEIGHT, value))
