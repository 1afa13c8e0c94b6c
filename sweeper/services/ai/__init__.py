"""
Sweeper AI Module

Optional model-assisted review of ambiguous classifications.
"""

from typing import Optional

from .base import (
    BaseModelProvider,
    ModelProviderError,
    ModelUnavailableError,
    ModelTimeoutError,
    ModelResponseParseError,
    ModelStatus,
    parse_verdict,
)

from .ollama_provider import OllamaProvider

from .overlay import ModelOverlay, init_model_overlay, get_model_overlay

from .prompts import SYSTEM_PROMPT, build_scan_prompt


PROVIDERS = {
    OllamaProvider.provider_name: OllamaProvider,
}


def create_provider(
    name: str,
    base_url: str,
    model: Optional[str] = None,
    timeout: float = 3.0,
) -> BaseModelProvider:
    """
    Create a provider by name.

    Raises:
        ValueError: Unknown provider name
    """
    provider_cls = PROVIDERS.get(name.lower())
    if provider_cls is None:
        raise ValueError(f"Unknown model provider: {name}")
    return provider_cls(base_url=base_url, model=model, timeout=timeout)


__all__ = [
    # Base
    'BaseModelProvider',
    'ModelProviderError',
    'ModelUnavailableError',
    'ModelTimeoutError',
    'ModelResponseParseError',
    'ModelStatus',
    'parse_verdict',

    # Providers
    'OllamaProvider',
    'PROVIDERS',
    'create_provider',

    # Overlay
    'ModelOverlay',
    'init_model_overlay',
    'get_model_overlay',

    # Prompts
    'SYSTEM_PROMPT',
    'build_scan_prompt',
]
