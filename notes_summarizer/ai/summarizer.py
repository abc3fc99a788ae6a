"""
Meeting Summarizer

Generates summaries of meeting transcripts from a user instruction using
the chat-completion client.
"""

import json
import logging
from typing import Any, Dict, Optional

from .completion_client import ChatCompletionClient
from .prompts import build_summary_messages
from ..core.exceptions import SummaryGenerationError


logger = logging.getLogger(__name__)

NO_SUMMARY_PREFIX = "⚠️ No summary generated."


def extract_summary_text(payload: Any) -> Optional[str]:
    """Return choices[0].message.content when it is a non-empty string, else None."""
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    if isinstance(content, str) and content:
        return content
    return None


def build_placeholder_summary(payload: Any) -> str:
    """Placeholder returned in place of a summary; embeds the raw provider payload."""
    raw = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return f"{NO_SUMMARY_PREFIX}\n\nRaw response: {raw}"


class MeetingSummarizer:
    """
    Generates AI summaries of meeting transcripts.

    A provider response without a completion yields a placeholder summary
    carrying the raw payload, unless strict mode is on.

    Usage:
        summarizer = MeetingSummarizer(ChatCompletionClient(config.completion))
        text = summarizer.summarize(transcript, "Summarize in bullet points")
    """

    def __init__(self, client: ChatCompletionClient, strict: bool = False):
        """
        Args:
            client: Chat-completion client
            strict: Raise SummaryGenerationError instead of returning a placeholder
        """
        self.client = client
        self.strict = strict

    def summarize(self, transcript: str, instruction: str) -> str:
        """
        Summarize a transcript according to an instruction.

        Raises:
            CompletionAPIError: Transport or decode failure talking to the provider
            SummaryGenerationError: Strict mode and the response had no completion
        """
        messages = build_summary_messages(transcript, instruction)
        payload: Dict[str, Any] = self.client.create_completion(messages)

        logger.debug(f"Completion API response: {json.dumps(payload, indent=2, ensure_ascii=False)}")

        summary = extract_summary_text(payload)
        if summary is not None:
            logger.info(f"Summary generated ({len(summary)} chars from {len(transcript)} char transcript)")
            return summary

        if self.strict:
            raise SummaryGenerationError("Completion response contained no summary")

        logger.warning("Completion response contained no summary; returning placeholder")
        return build_placeholder_summary(payload)
