"""
Tests for OllamaClient.

The HTTP session is replaced with a mock; no network access happens.
"""

import json

import pytest
import requests
from unittest.mock import MagicMock

from resume_builder.ai.ollama_client import OllamaClient


def _response(payload, status=200):
    response = MagicMock()
    response.status_code = status
    response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    return response


class TestOllamaClient:

    @pytest.fixture
    def client(self) -> OllamaClient:
        client = OllamaClient(base_url="http://ollama.test:11434/", model="test-model", timeout=3)
        client.session = MagicMock()
        return client

    def test_generate_posts_chat_request(self, client):
        client.session.post.return_value = _response({"message": {"content": "  hello  "}})

        result = client.generate("prompt", system_prompt="system", temperature=0.2)

        assert result == "hello"
        url = client.session.post.call_args.args[0]
        kwargs = client.session.post.call_args.kwargs
        assert url == "http://ollama.test:11434/api/chat"
        assert kwargs["timeout"] == 3
        assert kwargs["json"]["model"] == "test-model"
        assert kwargs["json"]["messages"][0] == {"role": "system", "content": "system"}
        assert kwargs["json"]["options"]["temperature"] == 0.2
        assert "format" not in kwargs["json"]

    def test_timeout_returns_none(self, client):
        client.session.post.side_effect = requests.Timeout("slow")

        assert client.generate("prompt") is None
        assert client.session.post.call_count == 1

    def test_connection_error_retried_once(self, client):
        client.session.post.side_effect = requests.ConnectionError("refused")

        assert client.generate("prompt") is None
        assert client.session.post.call_count == 2

    def test_http_error_returns_none(self, client):
        client.session.post.return_value = _response({}, status=500)

        assert client.generate("prompt") is None

    def test_missing_message_returns_none(self, client):
        client.session.post.return_value = _response({"done": True})

        assert client.generate("prompt") is None

    def test_generate_json(self, client):
        client.session.post.return_value = _response(
            {"message": {"content": json.dumps({"suggestions": ["a"]})}}
        )

        assert client.generate_json("prompt") == {"suggestions": ["a"]}
        assert client.session.post.call_args.kwargs["json"]["format"] == "json"

    def test_generate_json_invalid(self, client):
        client.session.post.return_value = _response({"message": {"content": "not json"}})

        assert client.generate_json("prompt") is None

    def test_generate_json_not_object(self, client):
        client.session.post.return_value = _response({"message": {"content": "[1, 2]"}})

        assert client.generate_json("prompt") is None

    def test_is_available(self, client):
        client.session.get.return_value = _response({"models": []})
        assert client.is_available() is True

        client.session.get.side_effect = requests.ConnectionError("down")
        assert client.is_available() is False
