# resume_builder/ai/ollama_client.py
import logging
import json
from typing import Optional, Dict, Any

import requests
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    retry_if_not_exception_type,
    before_sleep_log
)

logger = logging.getLogger(__name__)


class OllamaClient:
    """
    Client for the Ollama chat API

    Every request is bounded by ``timeout``; failures are logged and
    reported as None so callers can fall back to deterministic output.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        model: str = "llama3.2:3b",
        timeout: float = 10.0
    ):
        """
        Initialize Ollama client

        Args:
            base_url: Ollama API endpoint
            model: Model to use (llama3.2:3b, mistral, etc.)
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.model = model
        self.timeout = timeout
        self.session = requests.Session()

    def is_available(self) -> bool:
        """Check if Ollama is running"""
        try:
            response = self.session.get(
                f"{self.base_url}/api/tags",
                timeout=min(self.timeout, 5)
            )
            return response.status_code == 200
        except requests.RequestException as e:
            logger.warning(f"Ollama not available: {e}")
            return False

    @retry(
        stop=stop_after_attempt(2),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
        retry=(
            retry_if_exception_type(requests.ConnectionError) &
            retry_if_not_exception_type(requests.Timeout)
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True
    )
    def _post_chat(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = self.session.post(
            f"{self.base_url}/api/chat",
            json=payload,
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 500,
        json_mode: bool = False
    ) -> Optional[str]:
        """
        Generate text using Ollama

        Args:
            prompt: User prompt
            system_prompt: System instruction
            temperature: Creativity (0.0-1.0)
            max_tokens: Max response length
            json_mode: Ask the model to answer with a JSON document

        Returns:
            Generated text or None if failed
        """
        messages = []
        if system_prompt:
            messages.append({
                "role": "system",
                "content": system_prompt
            })
        messages.append({
            "role": "user",
            "content": prompt
        })

        payload = {
            "model": self.model,
            "messages": messages,
            "stream": False,
            "options": {
                "temperature": temperature,
                "num_predict": max_tokens
            }
        }
        if json_mode:
            payload["format"] = "json"

        try:
            result = self._post_chat(payload)
        except requests.Timeout:
            logger.error(f"Ollama request timed out after {self.timeout}s")
            return None
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Ollama generation failed: {e}")
            return None

        message = result.get("message") if isinstance(result, dict) else None
        if not isinstance(message, dict):
            logger.error("Ollama response has no message")
            return None

        content = message.get("content") or ""
        return content.strip() or None

    def generate_json(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.3,
        max_tokens: int = 1000
    ) -> Optional[Dict[str, Any]]:
        """
        Generate a JSON object using Ollama

        Returns:
            Parsed JSON object or None if generation or parsing failed
        """
        response = self.generate(
            prompt=prompt,
            system_prompt=system_prompt,
            temperature=temperature,
            max_tokens=max_tokens,
            json_mode=True
        )

        if not response:
            return None

        try:
            data = json.loads(response)
        except json.JSONDecodeError:
            logger.error(f"Ollama returned invalid JSON: {response[:200]}")
            return None

        if not isinstance(data, dict):
            logger.error("Ollama returned JSON that is not an object")
            return None

        return data
