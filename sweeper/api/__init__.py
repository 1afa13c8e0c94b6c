"""
Sweeper API Module

HTTP surface for classification and custom rule management.
"""

from .routes import get_api_router

__all__ = ['get_api_router']
