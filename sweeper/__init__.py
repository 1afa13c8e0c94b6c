"""
Sweeper

Heuristic spam classifier for short direct messages, with a user-managed
custom rule overlay and an optional local-model second opinion.
"""

__version__ = "1.2.0"

from sweeper.models.classification import (
    RiskLevel,
    ClassificationResult,
)
from sweeper.services.detection import (
    SpamDetectionEngine,
    get_detection_engine,
    classify,
    should_auto_flag,
)

__all__ = [
    '__version__',
    'RiskLevel',
    'ClassificationResult',
    'SpamDetectionEngine',
    'get_detection_engine',
    'classify',
    'should_auto_flag',
]
