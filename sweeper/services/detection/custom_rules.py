"""
Sweeper Custom Rule Store

User-managed URL patterns and keyword weights, persisted as JSON and pushed
into the detection engine after every change.

Entries are validated here, at write time, so the engine can treat every
custom entry as a safe literal.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from sweeper.models.rules import CustomRuleSet
from sweeper.utils.exceptions import (
    RuleConflictError,
    RuleNotFoundError,
    RuleStorageError,
)
from sweeper.utils.validators import (
    is_valid_domain_or_url,
    normalize_url_pattern,
    normalize_keyword,
    clamp_weight,
    DEFAULT_KEYWORD_WEIGHT,
    MIN_KEYWORD_WEIGHT,
)
from .engine import SpamDetectionEngine

logger = logging.getLogger(__name__)


class CustomRuleStore:
    """
    Manages the custom rule overlay.

    Every mutation builds a new CustomRuleSet, writes it to disk and then
    hands it to the engine. Mutations are serialized.
    """

    def __init__(self, path: str, engine: Optional[SpamDetectionEngine] = None):
        self.path = Path(path)
        self.engine = engine
        self._rules = CustomRuleSet()
        self._lock = threading.Lock()

    @property
    def rules(self) -> CustomRuleSet:
        """Current rule set."""
        return self._rules

    # ============================================================
    # Persistence
    # ============================================================

    def load(self) -> CustomRuleSet:
        """
        Load rules from disk and push them into the engine.

        A missing file is an empty rule set. An unreadable file is logged and
        treated as empty; stored URL patterns that no longer validate are
        dropped.
        """
        with self._lock:
            rules = self._read_file()
            self._apply(rules)
        logger.info(
            f"Loaded custom rules from {self.path}: "
            f"{len(rules.url_patterns)} URLs, {len(rules.keywords)} keywords"
        )
        return rules

    def _read_file(self) -> CustomRuleSet:
        if not self.path.exists():
            return CustomRuleSet()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            rules = CustomRuleSet.model_validate(data)
        except (OSError, json.JSONDecodeError, PydanticValidationError) as e:
            logger.error(f"Failed to load custom rules from {self.path}: {e}")
            return CustomRuleSet()

        valid = [p for p in rules.url_patterns if is_valid_domain_or_url(p)]
        if len(valid) != len(rules.url_patterns):
            dropped = [p for p in rules.url_patterns if p not in valid]
            logger.warning(f"Dropped invalid stored URL patterns: {dropped}")
            rules = CustomRuleSet(url_patterns=valid, keywords=rules.keywords)

        return rules

    def _write_file(self, rules: CustomRuleSet) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(rules.to_storage(), f, indent=2)
            tmp_path.replace(self.path)
        except OSError as e:
            logger.error(f"Failed to save custom rules to {self.path}: {e}")
            raise RuleStorageError(f"Could not save custom rules: {e}")

    def _apply(self, rules: CustomRuleSet) -> None:
        self._rules = rules
        if self.engine is not None:
            self.engine.load_custom_rules(rules)

    def _commit(self, url_patterns: List[str], keywords: Dict[str, int]) -> CustomRuleSet:
        rules = CustomRuleSet(url_patterns=url_patterns, keywords=keywords)
        self._write_file(rules)
        self._apply(rules)
        return rules

    # ============================================================
    # URL patterns
    # ============================================================

    def list_url_patterns(self) -> List[str]:
        return list(self._rules.url_patterns)

    def add_url_pattern(self, pattern: str) -> str:
        """
        Add a custom URL pattern.

        Raises:
            InvalidUrlPatternError: Not a domain or URL
            RuleConflictError: Pattern already exists
        """
        pattern = normalize_url_pattern(pattern)
        with self._lock:
            patterns = self.list_url_patterns()
            if pattern in patterns:
                raise RuleConflictError(f"Pattern already exists: {pattern}")
            patterns.append(pattern)
            self._commit(patterns, dict(self._rules.keywords))
        logger.info(f"Added custom URL pattern: {pattern}")
        return pattern

    def update_url_pattern(self, old_pattern: str, new_pattern: str) -> str:
        """Replace a URL pattern in place, keeping its position."""
        old_pattern = (old_pattern or "").strip().lower()
        new_pattern = normalize_url_pattern(new_pattern)
        with self._lock:
            patterns = self.list_url_patterns()
            if old_pattern not in patterns:
                raise RuleNotFoundError(f"Pattern not found: {old_pattern}")
            if new_pattern == old_pattern:
                return new_pattern
            if new_pattern in patterns:
                raise RuleConflictError(f"Pattern already exists: {new_pattern}")
            patterns[patterns.index(old_pattern)] = new_pattern
            self._commit(patterns, dict(self._rules.keywords))
        logger.info(f"Updated custom URL pattern: {old_pattern} -> {new_pattern}")
        return new_pattern

    def remove_url_pattern(self, pattern: str) -> None:
        pattern = (pattern or "").strip().lower()
        with self._lock:
            patterns = self.list_url_patterns()
            if pattern not in patterns:
                raise RuleNotFoundError(f"Pattern not found: {pattern}")
            patterns.remove(pattern)
            self._commit(patterns, dict(self._rules.keywords))
        logger.info(f"Removed custom URL pattern: {pattern}")

    # ============================================================
    # Keywords
    # ============================================================

    def list_keywords(self) -> Dict[str, int]:
        return dict(self._rules.keywords)

    def add_keyword(self, keyword: str, weight: int = DEFAULT_KEYWORD_WEIGHT) -> int:
        """
        Add a custom keyword.

        Returns:
            The stored (clamped) weight

        Raises:
            InvalidKeywordError: Empty keyword
            RuleConflictError: Keyword already exists
        """
        keyword = normalize_keyword(keyword)
        weight = clamp_weight(weight)
        with self._lock:
            keywords = self.list_keywords()
            if keyword in keywords:
                raise RuleConflictError(f"Keyword already exists: {keyword}")
            keywords[keyword] = weight
            self._commit(self.list_url_patterns(), keywords)
        logger.info(f"Added custom keyword: {keyword} (weight {weight})")
        return weight

    def set_keyword_weight(self, keyword: str, weight: int) -> int:
        keyword = normalize_keyword(keyword)
        weight = clamp_weight(weight, default=MIN_KEYWORD_WEIGHT)
        with self._lock:
            keywords = self.list_keywords()
            if keyword not in keywords:
                raise RuleNotFoundError(f"Keyword not found: {keyword}")
            keywords[keyword] = weight
            self._commit(self.list_url_patterns(), keywords)
        return weight

    def rename_keyword(self, old_keyword: str, new_keyword: str) -> str:
        """Rename a keyword, carrying its weight over."""
        old_keyword = normalize_keyword(old_keyword)
        new_keyword = normalize_keyword(new_keyword)
        with self._lock:
            keywords = self.list_keywords()
            if old_keyword not in keywords:
                raise RuleNotFoundError(f"Keyword not found: {old_keyword}")
            if new_keyword == old_keyword:
                return new_keyword
            if new_keyword in keywords:
                raise RuleConflictError(f"Keyword already exists: {new_keyword}")
            renamed = {
                (new_keyword if k == old_keyword else k): w
                for k, w in keywords.items()
            }
            self._commit(self.list_url_patterns(), renamed)
        logger.info(f"Renamed custom keyword: {old_keyword} -> {new_keyword}")
        return new_keyword

    def remove_keyword(self, keyword: str) -> None:
        keyword = normalize_keyword(keyword)
        with self._lock:
            keywords = self.list_keywords()
            if keyword not in keywords:
                raise RuleNotFoundError(f"Keyword not found: {keyword}")
            del keywords[keyword]
            self._commit(self.list_url_patterns(), keywords)
        logger.info(f"Removed custom keyword: {keyword}")

    def reset(self) -> CustomRuleSet:
        """Clear all custom patterns and keywords."""
        with self._lock:
            rules = self._commit([], {})
        logger.info("Custom rules reset")
        return rules


# Global instance
_custom_rule_store: Optional[CustomRuleStore] = None


def init_custom_rule_store(path: str, engine: Optional[SpamDetectionEngine] = None) -> CustomRuleStore:
    """Create the global rule store and load it into the engine."""
    global _custom_rule_store
    _custom_rule_store = CustomRuleStore(path, engine)
    _custom_rule_store.load()
    return _custom_rule_store


def get_custom_rule_store() -> Optional[CustomRuleStore]:
    """Get the global rule store (None until initialized)."""
    return _custom_rule_store
