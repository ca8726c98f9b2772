"""Base client interface for text-generation backends."""

from __future__ import annotations

from abc import ABC, abstractmethod


class LLMClientError(RuntimeError):
    """Raised when the generation endpoint cannot be reached or fails mid-response."""


class BaseLLMClient(ABC):
    """Abstract base class for generation clients.

    Implementations send one prompt and return the complete answer text.
    Any transport problem must surface as ``LLMClientError``.
    """

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Send a prompt and return the full generated text.

        Args:
            prompt: The natural-language request

        Returns:
            Generated text, possibly empty

        Raises:
            LLMClientError: If the request fails
        """
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """Return the model identifier being used."""
        pass


__all__ = ["BaseLLMClient", "LLMClientError"]
