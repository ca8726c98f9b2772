"""Streaming client for the Ollama ``/api/generate`` endpoint."""

from __future__ import annotations

import requests

from ..models import GenerateRequest
from ..streaming import decode_stream
from .base import BaseLLMClient, LLMClientError


class OllamaClient(BaseLLMClient):
    """Client for Ollama-served models using streamed generation.

    The response body is consumed as it arrives and decoded into a single
    string. The connection is released as soon as the final record is read.
    """

    def __init__(
        self,
        model_id: str = "llama3.1:8b",
        base_url: str = "http://localhost:11434",
        timeout: int = 120,
    ) -> None:
        """Initialize Ollama client.

        Args:
            model_id: Ollama model name (e.g., "llama3.1:8b", "mistral")
            base_url: Ollama server URL
            timeout: Request timeout in seconds
        """
        self.model_id = model_id
        self.base_url = base_url
        self.timeout = timeout

    def generate(self, prompt: str) -> str:
        payload = GenerateRequest(model=self.model_id, prompt=prompt).model_dump()
        endpoint = self._compose_url("/api/generate")

        try:
            with requests.post(endpoint, json=payload, stream=True, timeout=self.timeout) as response:
                if response.status_code != requests.codes.ok:
                    raise LLMClientError(
                        f"Ollama generation failed with status {response.status_code}: {response.text}"
                    )
                return decode_stream(response.iter_content(chunk_size=None))
        except requests.RequestException as exc:
            raise LLMClientError(f"Failed to reach Ollama server at {endpoint}: {exc}") from exc

    def get_model_name(self) -> str:
        """Return the Ollama model identifier."""
        return f"ollama/{self.model_id}"

    def _compose_url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}{path}"


__all__ = ["OllamaClient"]
