"""
Test data factories for provider payloads and relay responses.
"""

import io
from typing import Any, Dict, List, Optional

import docx


class CompletionTestFactory:
    """Factory for chat-completion API payloads (OpenAI-compatible shape)."""

    @staticmethod
    def create_completion(content: str = "- Decision: ship on Friday", model: str = "llama-3.3-70b-versatile") -> Dict[str, Any]:
        """
        Create a successful completion response.

        Args:
            content: Assistant message text
            model: Model identifier echoed by the provider

        Returns:
            Dictionary matching the /chat/completions response format
        """
        return {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "model": model,
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
            "usage": {"prompt_tokens": 120, "completion_tokens": 30, "total_tokens": 150},
        }

    @staticmethod
    def create_error(message: str = "Invalid API Key", code: str = "invalid_api_key") -> Dict[str, Any]:
        """Create a provider error body (no choices)."""
        return {"error": {"message": message, "type": "invalid_request_error", "code": code}}


class FakeResponse:
    """Minimal stand-in for a requests/httpx response."""

    def __init__(self, status_code: int = 200, body: Any = None, json_error: Optional[Exception] = None):
        self.status_code = status_code
        self._body = body
        self._json_error = json_error

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._body


class DocumentTestFactory:
    """Builds .docx payloads in memory."""

    @staticmethod
    def create_docx(paragraphs: List[str], table: Optional[List[List[str]]] = None) -> bytes:
        """
        Create a Word document.

        Args:
            paragraphs: Body paragraphs, in order
            table: Optional table (list of rows) appended after the paragraphs

        Returns:
            .docx file bytes
        """
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)

        if table:
            docx_table = document.add_table(rows=len(table), cols=len(table[0]))
            for r, row in enumerate(table):
                for c, value in enumerate(row):
                    docx_table.cell(r, c).text = value

        buffer = io.BytesIO()
        document.save(buffer)
        return buffer.getvalue()
