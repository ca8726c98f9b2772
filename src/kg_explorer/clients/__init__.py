"""Clients for the text-generation endpoint."""

from __future__ import annotations

from .base import BaseLLMClient, LLMClientError
from .ollama_client import OllamaClient

__all__ = [
    "BaseLLMClient",
    "LLMClientError",
    "OllamaClient",
]
