"""
Sweeper Ollama Provider

Local inference through an Ollama server on the same machine. Message text
never leaves the host.
"""

import asyncio
import logging
from typing import Optional, Dict, Any

import aiohttp

from .base import (
    BaseModelProvider,
    ModelStatus,
    ModelProviderError,
    ModelUnavailableError,
    ModelTimeoutError,
)

logger = logging.getLogger(__name__)


class OllamaProvider(BaseModelProvider):
    """
    Ollama local model provider.

    Single attempt per call, no retries; the overlay treats any failure
    as "model unavailable".
    """

    provider_name = "ollama"
    default_model = "gemma2:2b"

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:11434",
        model: Optional[str] = None,
        timeout: float = 3.0,
    ):
        super().__init__(model, timeout)
        self.base_url = base_url.rstrip("/")

    async def check_availability(self) -> ModelStatus:
        """
        Check that the server is up and the model is pulled.

        Returns:
            Resulting status (also stored on the provider)
        """
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(f"{self.base_url}/api/tags") as response:
                    if response.status != 200:
                        self.status = ModelStatus.UNAVAILABLE
                        self.status_message = f"Server returned {response.status}"
                        return self.status
                    data = await response.json()

            names = [m.get("name", "") for m in data.get("models", [])]
            if self.model in names:
                self.status = ModelStatus.AVAILABLE
                self.status_message = "Model ready"
            else:
                self.status = ModelStatus.UNAVAILABLE
                self.status_message = f"Model {self.model} not pulled"

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.status = ModelStatus.UNAVAILABLE
            self.status_message = f"Server not reachable: {e}"

        logger.info(f"Ollama status: {self.status.value} - {self.status_message}")
        return self.status

    async def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """
        Generate a reply with the local model.

        Raises:
            ModelUnavailableError: Server down or model missing
            ModelTimeoutError: No reply within the timeout
            ModelProviderError: Any other server error
        """
        payload: Dict[str, Any] = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "format": "json",
            "options": {"temperature": 0},
        }
        if system_prompt:
            payload["system"] = system_prompt

        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(f"{self.base_url}/api/generate", json=payload) as response:
                    if response.status == 404:
                        self.status = ModelStatus.UNAVAILABLE
                        raise ModelUnavailableError(f"Model {self.model} not found")
                    if response.status != 200:
                        text = await response.text()
                        raise ModelProviderError(f"API error ({response.status}): {text[:200]}")

                    data = await response.json()
                    self.status = ModelStatus.AVAILABLE
                    return data.get("response", "")

        except asyncio.TimeoutError:
            raise ModelTimeoutError(f"Inference timed out after {self.timeout}s")

        except aiohttp.ClientError as e:
            self.status = ModelStatus.ERROR
            raise ModelUnavailableError(f"Connection error: {e}")
