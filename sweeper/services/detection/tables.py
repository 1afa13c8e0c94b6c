"""
Sweeper Rule Tables

Compiled, immutable snapshot of every table the detection engine reads:
static URL patterns, safe domains, keyword weights, dynamic regex rules
and the user's custom overlay.

Static entries are compiled once per process. A custom rule update builds a
new snapshot that shares the static part, so readers holding the previous
snapshot are never affected.
"""

import re
import logging
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Dict, Iterable, Optional, Pattern, Tuple

from sweeper.models.rules import CustomRuleSet
from .patterns import (
    HIGH_RISK_URL_PATTERNS,
    MEDIUM_RISK_URL_PATTERNS,
    SAFE_DOMAINS,
    SPAM_KEYWORD_WEIGHTS,
    SPAM_REGEX_PATTERNS,
    RegexRule,
)

logger = logging.getLogger(__name__)

CUSTOM_PREFIX = "custom:"
REGEX_PREFIX = "regex:"


@dataclass(frozen=True)
class CompiledPattern:
    """URL pattern with its source kept for evidence."""
    source: str
    regex: Pattern


@dataclass(frozen=True)
class CompiledKeyword:
    """
    Weighted matcher.

    key is the evidence name: the phrase itself, "custom:<phrase>" or
    "regex:<rule name>".
    """
    key: str
    weight: int
    regex: Pattern
    keep_samples: bool = False


def compile_url_pattern(source: str) -> CompiledPattern:
    return CompiledPattern(source=source, regex=re.compile(source, re.IGNORECASE))


def compile_keyword(phrase: str, weight: int, key: Optional[str] = None) -> CompiledKeyword:
    """Whole-word, case-insensitive matcher for a literal phrase."""
    regex = re.compile(r"\b" + re.escape(phrase) + r"\b", re.IGNORECASE)
    return CompiledKeyword(key=key or phrase, weight=weight, regex=regex)


def compile_regex_rule(rule: RegexRule) -> CompiledKeyword:
    return CompiledKeyword(
        key=f"{REGEX_PREFIX}{rule.name}",
        weight=rule.weight,
        regex=re.compile(rule.pattern, rule.flags),
        keep_samples=True,
    )


@dataclass(frozen=True)
class RuleTables:
    """Everything one classification reads. Never mutated after creation."""
    high_risk_urls: Tuple[CompiledPattern, ...]
    medium_risk_urls: Tuple[CompiledPattern, ...]
    safe_domains: Tuple[str, ...]
    keywords: Tuple[CompiledKeyword, ...]
    regex_rules: Tuple[CompiledKeyword, ...]
    custom_url_patterns: Tuple[str, ...] = ()
    custom_keywords: Tuple[CompiledKeyword, ...] = ()

    def with_custom_rules(self, rules: Optional[CustomRuleSet]) -> "RuleTables":
        """Return a new snapshot carrying the given custom overlay."""
        if rules is None:
            rules = CustomRuleSet()
        return replace(
            self,
            custom_url_patterns=tuple(rules.url_patterns),
            custom_keywords=tuple(
                compile_keyword(keyword, weight, key=f"{CUSTOM_PREFIX}{keyword}")
                for keyword, weight in rules.keywords.items()
            ),
        )

    def summary(self) -> Dict[str, int]:
        """Entry counts per table."""
        return {
            'high_risk_urls': len(self.high_risk_urls),
            'medium_risk_urls': len(self.medium_risk_urls),
            'safe_domains': len(self.safe_domains),
            'keywords': len(self.keywords),
            'regex_rules': len(self.regex_rules),
            'custom_url_patterns': len(self.custom_url_patterns),
            'custom_keywords': len(self.custom_keywords),
        }


def build_tables(
    high_risk_urls: Iterable[str] = HIGH_RISK_URL_PATTERNS,
    medium_risk_urls: Iterable[str] = MEDIUM_RISK_URL_PATTERNS,
    safe_domains: Iterable[str] = SAFE_DOMAINS,
    keywords: Optional[Dict[str, int]] = None,
    regex_rules: Iterable[RegexRule] = SPAM_REGEX_PATTERNS,
    custom_rules: Optional[CustomRuleSet] = None,
) -> RuleTables:
    """
    Compile a table snapshot.

    Defaults are the shipped tables; tests pass small fixture tables instead.
    """
    if keywords is None:
        keywords = SPAM_KEYWORD_WEIGHTS

    tables = RuleTables(
        high_risk_urls=tuple(compile_url_pattern(p) for p in high_risk_urls),
        medium_risk_urls=tuple(compile_url_pattern(p) for p in medium_risk_urls),
        safe_domains=tuple(d.lower() for d in safe_domains),
        keywords=tuple(compile_keyword(k, w) for k, w in keywords.items()),
        regex_rules=tuple(compile_regex_rule(r) for r in regex_rules),
    )
    logger.debug(f"Compiled rule tables: {tables.summary()}")
    return tables.with_custom_rules(custom_rules)


@lru_cache()
def get_default_tables() -> RuleTables:
    """Shipped tables, compiled once, with an empty custom overlay."""
    return build_tables()
