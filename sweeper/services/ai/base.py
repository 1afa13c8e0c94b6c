"""
Sweeper Model Provider Base Class

Abstract base class for the external spam classifier consulted by the
model overlay. Providers run local inference only.
"""

import re
import json
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from sweeper.models.classification import ModelVerdict
from .prompts import SYSTEM_PROMPT, build_scan_prompt

logger = logging.getLogger(__name__)


class ModelProviderError(Exception):
    """Base exception for model provider errors."""
    pass


class ModelUnavailableError(ModelProviderError):
    """Model is not installed, not downloaded or not reachable."""
    pass


class ModelTimeoutError(ModelProviderError):
    """Inference timed out."""
    pass


class ModelResponseParseError(ModelProviderError):
    """Model reply is not a usable verdict."""
    pass


class ModelStatus(str, Enum):
    """Availability of the local model."""
    UNKNOWN = "unknown"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    ERROR = "error"


# Markdown code fences around JSON replies
_FENCE_START = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_END = re.compile(r"\s*```$")


def parse_verdict(raw: str) -> ModelVerdict:
    """
    Parse a model reply into a verdict.

    Accepts plain JSON or JSON wrapped in ``` fences. isSpam must be a
    boolean and confidence a number; confidence is clamped to [0, 1].

    Raises:
        ModelResponseParseError: If the reply is not valid JSON or lacks fields
    """
    cleaned = _FENCE_END.sub("", _FENCE_START.sub("", (raw or "").strip())).strip()

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ModelResponseParseError(f"Reply is not JSON: {e}")

    if not isinstance(data, dict):
        raise ModelResponseParseError("Reply is not a JSON object")

    is_spam = data.get("isSpam")
    confidence = data.get("confidence")
    if not isinstance(is_spam, bool):
        raise ModelResponseParseError("Reply missing boolean 'isSpam'")
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        raise ModelResponseParseError("Reply missing numeric 'confidence'")

    return ModelVerdict(
        is_spam=is_spam,
        confidence=min(1.0, max(0.0, float(confidence))),
        category=str(data.get("category") or "Unknown"),
        reason=str(data.get("reason") or ""),
    )


class BaseModelProvider(ABC):
    """
    Abstract base class for model providers.

    Subclasses implement generate() and check_availability(); scan() handles
    input gating, truncation and reply parsing.
    """

    provider_name: str = "base"
    default_model: str = ""

    # Greetings and other very short messages are not worth a model call
    MIN_TEXT_LENGTH = 10
    MAX_TEXT_LENGTH = 500

    def __init__(self, model: Optional[str] = None, timeout: float = 3.0):
        """
        Initialize provider.

        Args:
            model: Model to use (defaults to provider default)
            timeout: Inference timeout in seconds
        """
        self.model = model or self.default_model
        self.timeout = timeout
        self.status = ModelStatus.UNKNOWN
        self.status_message = ""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    async def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """
        Run the model on a prompt.

        Returns:
            Raw text reply
        """
        pass

    @abstractmethod
    async def check_availability(self) -> ModelStatus:
        """Probe the model without running inference."""
        pass

    async def close(self) -> None:
        """Release provider resources."""
        return None

    def prepare_text(self, text: Optional[str]) -> Optional[str]:
        """Return the text to send, or None if it should not be sent."""
        if not text or len(text.strip()) < self.MIN_TEXT_LENGTH:
            return None
        if len(text) > self.MAX_TEXT_LENGTH:
            return text[:self.MAX_TEXT_LENGTH] + "..."
        return text

    async def scan(self, text: Optional[str]) -> Optional[ModelVerdict]:
        """
        Ask the model whether a message is spam.

        Returns:
            ModelVerdict, or None when the text is too short to evaluate

        Raises:
            ModelProviderError: On provider failure or unusable reply
        """
        prepared = self.prepare_text(text)
        if prepared is None:
            return None

        raw = await self.generate(build_scan_prompt(prepared), system_prompt=SYSTEM_PROMPT)
        self.logger.debug(f"Model raw response: {raw[:200]}")

        verdict = parse_verdict(raw)
        self.logger.debug(f"Model verdict: {verdict}")
        return verdict
