"""Tests for the streaming Ollama client."""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from kg_explorer.clients import LLMClientError, OllamaClient


def _response(chunks, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.text = "boom"
    response.iter_content.return_value = iter(chunks)
    return response


def _patched_post(response):
    mock_post = MagicMock()
    mock_post.return_value.__enter__.return_value = response
    return patch("kg_explorer.clients.ollama_client.requests.post", mock_post)


BODY = [
    b'{"response": "Hel',
    b'lo", "done": false}\n{"response": " world", "done": true}\n',
]


class TestOllamaClient:
    """Tests for OllamaClient.generate."""

    def test_defaults(self):
        client = OllamaClient()
        assert client.model_id == "llama3.1:8b"
        assert client.base_url == "http://localhost:11434"
        assert client.timeout == 120
        assert client.get_model_name() == "ollama/llama3.1:8b"

    def test_streams_and_decodes_answer(self):
        with _patched_post(_response(BODY)) as mock_post:
            text = OllamaClient(model_id="m", base_url="http://host:1234/", timeout=7).generate("Hi?")

        assert text == "Hello world"
        args, kwargs = mock_post.call_args
        assert args[0] == "http://host:1234/api/generate"
        assert kwargs["json"] == {"model": "m", "prompt": "Hi?"}
        assert kwargs["stream"] is True
        assert kwargs["timeout"] == 7

    def test_payload_is_json_serializable(self):
        with _patched_post(_response(BODY)) as mock_post:
            OllamaClient().generate('quote " and newline \n')
        json.dumps(mock_post.call_args.kwargs["json"])

    def test_error_status_raises(self):
        with _patched_post(_response([], status_code=500)):
            with pytest.raises(LLMClientError, match="status 500"):
                OllamaClient().generate("Hi?")

    def test_connection_error_raises(self):
        mock_post = MagicMock(side_effect=requests.ConnectionError("refused"))
        with patch("kg_explorer.clients.ollama_client.requests.post", mock_post):
            with pytest.raises(LLMClientError, match="Failed to reach"):
                OllamaClient().generate("Hi?")

    def test_mid_stream_failure_raises(self):
        def broken():
            yield b'{"response": "partial", "done": false}\n'
            raise requests.exceptions.ChunkedEncodingError("connection reset")

        response = MagicMock()
        response.status_code = 200
        response.iter_content.return_value = broken()
        with _patched_post(response):
            with pytest.raises(LLMClientError):
                OllamaClient().generate("Hi?")
