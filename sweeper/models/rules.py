"""
Sweeper Custom Rule Models

Pydantic models for the user-supplied URL patterns and keyword weights.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Dict, Optional

from sweeper.utils.validators import clamp_weight, DEFAULT_KEYWORD_WEIGHT


class CustomRuleSet(BaseModel):
    """
    User-defined overlay on top of the static pattern tables.

    Serialized with the same keys the settings store has always used
    (customUrlPatterns / customKeywords). Entries are lower-cased and
    de-duplicated; weights are clamped to [1, 10].
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    url_patterns: List[str] = Field(default_factory=list, alias="customUrlPatterns")
    keywords: Dict[str, int] = Field(default_factory=dict, alias="customKeywords")

    @field_validator("url_patterns", mode="before")
    @classmethod
    def _dedupe_patterns(cls, value):
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            raise ValueError("URL patterns must be a list of strings")
        seen: List[str] = []
        for pattern in value:
            pattern = str(pattern).strip().lower()
            if pattern and pattern not in seen:
                seen.append(pattern)
        return seen

    @field_validator("keywords", mode="before")
    @classmethod
    def _clamp_keywords(cls, value):
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("Keywords must be an object of keyword to weight")
        cleaned: Dict[str, int] = {}
        for keyword, weight in value.items():
            keyword = str(keyword).strip().lower()
            if keyword and keyword not in cleaned:
                cleaned[keyword] = clamp_weight(weight)
        return cleaned

    def to_storage(self) -> Dict:
        """Serialize using the storage key names."""
        return self.model_dump(by_alias=True)


# Request models

class UrlPatternCreate(BaseModel):
    """Request to add a custom URL pattern."""
    pattern: str = Field(..., min_length=1, max_length=253, description="Domain or URL fragment")


class UrlPatternUpdate(BaseModel):
    """Request to replace a custom URL pattern."""
    old_pattern: str = Field(..., min_length=1)
    new_pattern: str = Field(..., min_length=1, max_length=253)


class KeywordCreate(BaseModel):
    """Request to add a custom keyword."""
    keyword: str = Field(..., min_length=1, max_length=200, description="Word or phrase")
    weight: int = Field(DEFAULT_KEYWORD_WEIGHT, description="Clamped to 1-10")


class KeywordUpdate(BaseModel):
    """Request to change a keyword's weight or rename it."""
    weight: Optional[int] = Field(None, description="New weight, clamped to 1-10")
    new_keyword: Optional[str] = Field(None, max_length=200, description="Rename, keeping the weight")
