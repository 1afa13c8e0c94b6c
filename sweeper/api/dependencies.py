"""
Sweeper API Dependencies

FastAPI dependency injection for settings, the detection engine, the custom
rule store and the model overlay.
"""

import logging

from sweeper.config import Settings, get_settings
from sweeper.services.detection import (
    SpamDetectionEngine,
    CustomRuleStore,
    get_detection_engine,
    get_custom_rule_store,
    init_custom_rule_store,
)
from sweeper.services.ai import ModelOverlay, get_model_overlay

logger = logging.getLogger(__name__)


def get_engine() -> SpamDetectionEngine:
    """Detection engine used by all routes."""
    return get_detection_engine()


def get_rule_store() -> CustomRuleStore:
    """
    Custom rule store, created from settings on first use.

    The application lifespan normally initializes it at startup.
    """
    store = get_custom_rule_store()
    if store is None:
        settings = get_settings()
        logger.info(f"Initializing custom rule store at {settings.custom_rules_path}")
        store = init_custom_rule_store(settings.custom_rules_path, get_detection_engine())
    return store


def get_overlay() -> ModelOverlay:
    """Model overlay (disabled unless configured)."""
    return get_model_overlay()


__all__ = [
    'Settings',
    'get_settings',
    'get_engine',
    'get_rule_store',
    'get_overlay',
]
