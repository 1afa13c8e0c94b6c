"""
Sweeper Custom Rules API Routes

Endpoints for managing user URL patterns and keyword weights.
Every change is persisted and applied to the detection engine immediately.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, HTTPException, Depends, Query
from pydantic import BaseModel

from sweeper.api.dependencies import get_rule_store
from sweeper.models.rules import (
    UrlPatternCreate,
    UrlPatternUpdate,
    KeywordCreate,
    KeywordUpdate,
)
from sweeper.utils.exceptions import (
    SweeperBaseException,
    ValidationError,
    RuleConflictError,
    RuleNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rules", tags=["rules"])


# Response Models

class UrlPatternListResponse(BaseModel):
    total: int
    patterns: List[str]


class KeywordListResponse(BaseModel):
    total: int
    keywords: Dict[str, int]


class KeywordResponse(BaseModel):
    keyword: str
    weight: int


def _http_error(exc: SweeperBaseException) -> HTTPException:
    """Map a rule error to an HTTP error."""
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=400, detail=exc.message)
    if isinstance(exc, RuleConflictError):
        return HTTPException(status_code=409, detail=exc.message)
    if isinstance(exc, RuleNotFoundError):
        return HTTPException(status_code=404, detail=exc.message)
    logger.error(f"Custom rule operation failed: {exc.message}")
    return HTTPException(status_code=500, detail=exc.message)


# Endpoints

@router.get("")
async def get_rules(store=Depends(get_rule_store)):
    """Full custom rule set, in storage format."""
    return store.rules.to_storage()


@router.post("/reset")
async def reset_rules(store=Depends(get_rule_store)):
    """Remove all custom URL patterns and keywords."""
    try:
        rules = store.reset()
    except SweeperBaseException as e:
        raise _http_error(e)
    return rules.to_storage()


# URL patterns

@router.get("/urls", response_model=UrlPatternListResponse)
async def list_url_patterns(store=Depends(get_rule_store)):
    """List custom URL patterns."""
    patterns = store.list_url_patterns()
    return UrlPatternListResponse(total=len(patterns), patterns=patterns)


@router.post("/urls", status_code=201)
async def add_url_pattern(request: UrlPatternCreate, store=Depends(get_rule_store)):
    """Add a custom URL pattern (domain or URL)."""
    try:
        pattern = store.add_url_pattern(request.pattern)
    except SweeperBaseException as e:
        raise _http_error(e)
    return {"pattern": pattern}


@router.put("/urls")
async def update_url_pattern(request: UrlPatternUpdate, store=Depends(get_rule_store)):
    """Replace a custom URL pattern."""
    try:
        pattern = store.update_url_pattern(request.old_pattern, request.new_pattern)
    except SweeperBaseException as e:
        raise _http_error(e)
    return {"pattern": pattern}


@router.delete("/urls")
async def remove_url_pattern(
    pattern: str = Query(..., min_length=1),
    store=Depends(get_rule_store),
):
    """Remove a custom URL pattern."""
    try:
        store.remove_url_pattern(pattern)
    except SweeperBaseException as e:
        raise _http_error(e)
    return {"status": "deleted", "pattern": pattern.strip().lower()}


# Keywords

@router.get("/keywords", response_model=KeywordListResponse)
async def list_keywords(store=Depends(get_rule_store)):
    """List custom keywords with their weights."""
    keywords = store.list_keywords()
    return KeywordListResponse(total=len(keywords), keywords=keywords)


@router.post("/keywords", status_code=201, response_model=KeywordResponse)
async def add_keyword(request: KeywordCreate, store=Depends(get_rule_store)):
    """Add a custom keyword; the weight is clamped to 1-10."""
    try:
        weight = store.add_keyword(request.keyword, request.weight)
    except SweeperBaseException as e:
        raise _http_error(e)
    return KeywordResponse(keyword=request.keyword.strip().lower(), weight=weight)


@router.put("/keywords/{keyword}", response_model=KeywordResponse)
async def update_keyword(
    keyword: str,
    request: KeywordUpdate,
    store=Depends(get_rule_store),
):
    """
    Rename a keyword and/or change its weight.

    A rename carries the existing weight over unless a new weight is given.
    """
    if request.new_keyword is None and request.weight is None:
        raise HTTPException(status_code=400, detail="Nothing to update")

    try:
        current = keyword
        if request.new_keyword is not None:
            current = store.rename_keyword(keyword, request.new_keyword)
        if request.weight is not None:
            store.set_keyword_weight(current, request.weight)
    except SweeperBaseException as e:
        raise _http_error(e)

    current = current.strip().lower()
    return KeywordResponse(keyword=current, weight=store.list_keywords()[current])


@router.delete("/keywords/{keyword}")
async def remove_keyword(keyword: str, store=Depends(get_rule_store)):
    """Remove a custom keyword."""
    try:
        store.remove_keyword(keyword)
    except SweeperBaseException as e:
        raise _http_error(e)
    return {"status": "deleted", "keyword": keyword.strip().lower()}
