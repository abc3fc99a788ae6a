"""
Workflow Controller

Sequences the upload -> summarize -> send workflow against the relay
endpoints. State changes go through the pure transitions in session.py;
this module only adds the relay round trips and their error mapping.
"""

import logging
from typing import Any, Dict, Optional, Protocol, Tuple

from . import session
from .session import SessionState, TransitionResult


logger = logging.getLogger(__name__)

SUMMARIZE_PATH = "/api/summarize"
SEND_EMAIL_PATH = "/api/sendEmail"


class Relay(Protocol):
    """Anything that answers a relay POST with (ok, body)."""

    def post(self, path: str, payload: Dict[str, Any]) -> Tuple[bool, Dict[str, Any]]:
        ...


class RelayClient:
    """
    Calls the relay endpoints of a separately deployed server over HTTP.

    Works with any requests-compatible session object exposing
    ``post(url, json=..., timeout=...)``.
    """

    def __init__(self, http: Any, base_url: str = "", timeout: float = 90.0):
        self.http = http
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def post(self, path: str, payload: Dict[str, Any]) -> Tuple[bool, Dict[str, Any]]:
        """
        POST a JSON payload to a relay.

        Returns:
            (ok, body) where ok is True for a 2xx status

        Raises:
            Whatever the underlying session raises on transport failure, and
            ValueError when the body is not JSON
        """
        response = self.http.post(f"{self.base_url}{path}", json=payload, timeout=self.timeout)
        body = response.json()
        if not isinstance(body, dict):
            body = {}
        return 200 <= response.status_code < 300, body


class WorkflowController:
    """
    Runs the generate and send actions for one session snapshot.

    Busy flags are set before each relay call and cleared on every exit
    path, whatever the call does. Failed calls are never retried.

    Usage:
        controller = WorkflowController(LocalRelay(summarizer, sender))
        result = controller.generate(state)
    """

    def __init__(self, relay: Relay):
        self.relay = relay

    def upload(self, state: SessionState, file_name: str, data: bytes) -> TransitionResult:
        return session.upload(state, file_name, data)

    def generate(self, state: SessionState) -> TransitionResult:
        """Request a summary for the current transcript and instruction."""
        started = session.begin_generate(state)
        if not started.state.generating:
            return started

        in_flight = started.state
        payload = {"transcript": in_flight.transcript_text, "prompt": in_flight.instruction_text}

        try:
            ok, body = self.relay.post(SUMMARIZE_PATH, payload)
        except Exception as e:
            logger.error(f"Summarize relay call failed: {e}", exc_info=True)
            return session.generate_failed(in_flight, "Error generating summary.")

        summary = body.get("summary")
        if ok and isinstance(summary, str):
            return session.generate_succeeded(in_flight, summary)

        return session.generate_failed(in_flight, _error_message(body, "Failed to generate summary."))

    def send(self, state: SessionState) -> TransitionResult:
        """Email the current summary to the recipient list."""
        started = session.begin_send(state)
        if not started.state.sending:
            return started

        in_flight = started.state
        payload = {"recipients": list(in_flight.recipients), "summary": in_flight.summary_text}

        try:
            ok, body = self.relay.post(SEND_EMAIL_PATH, payload)
        except Exception as e:
            logger.error(f"Send-email relay call failed: {e}", exc_info=True)
            return session.send_failed(in_flight, "Error sending email.")

        if ok:
            return session.send_succeeded(in_flight, _message(body) or "Email sent successfully!")

        return session.send_failed(in_flight, _error_message(body, "Failed to send email."))


def _message(body: Dict[str, Any]) -> Optional[str]:
    message = body.get("message")
    return message if isinstance(message, str) and message else None


def _error_message(body: Dict[str, Any], fallback: str) -> str:
    error = body.get("error")
    return error if isinstance(error, str) and error else fallback
