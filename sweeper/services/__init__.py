"""
Sweeper Services Package

Business logic modules:
- detection: heuristic classifier and custom rule store
- ai: optional local-model overlay
"""

# Services are imported explicitly when needed to avoid circular imports
# Example: from sweeper.services.detection import get_detection_engine

__all__ = [
    'detection',
    'ai',
]
