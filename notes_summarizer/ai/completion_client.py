"""
Chat Completion API Client

Thin wrapper around an OpenAI-compatible /chat/completions endpoint
(Groq by default). One request per call: no streaming, no retries.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..core.config import CompletionConfig
from ..core.exceptions import CompletionAPIError


logger = logging.getLogger(__name__)


class ChatCompletionClient:
    """
    Chat-completion API client for generating meeting summaries.

    Usage:
        config = CompletionConfig(api_key='gsk_...')
        client = ChatCompletionClient(config)
        payload = client.create_completion([
            {"role": "system", "content": "You are a meeting notes summarizer."},
            {"role": "user", "content": "Transcript: ..."},
        ])
    """

    def __init__(self, config: CompletionConfig, session: Optional[requests.Session] = None):
        """
        Initialize chat-completion client.

        Args:
            config: CompletionConfig with API key, endpoint and model
            session: Optional requests session (defaults to a new one)
        """
        self.config = config
        self._session = session or requests.Session()
        logger.info(f"ChatCompletionClient initialized (model: {config.model})")

    def create_completion(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        """
        Send a conversation to the provider and return its decoded JSON payload.

        The payload is returned whatever its HTTP status: provider error bodies
        are JSON too, and callers decide how to treat a response without choices.

        Args:
            messages: Messages array (role/content dicts)

        Returns:
            Decoded provider response

        Raises:
            CompletionAPIError: On transport failure or a non-JSON body
        """
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        body = {"model": self.config.model, "messages": messages}

        try:
            logger.debug(f"POST {self.config.api_url} (model: {self.config.model}, {len(messages)} messages)")
            response = self._session.post(
                self.config.api_url,
                json=body,
                headers=headers,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            raise CompletionAPIError(f"Chat completion request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise CompletionAPIError(
                f"Chat completion returned non-JSON body (status {response.status_code})"
            ) from e

        if not response.ok:
            logger.warning(f"Chat completion API returned {response.status_code}")

        return payload
