"""
Relay Handlers

The server side of /api/summarize and /api/sendEmail as plain functions
returning (status_code, body). The HTTP routes wrap them in JSON
responses; LocalRelay lets the page controller call them in-process.
"""

import logging
from typing import Any, Dict, List, Tuple

from .controller import SEND_EMAIL_PATH, SUMMARIZE_PATH
from ..ai.summarizer import MeetingSummarizer
from ..mail.sender import EmailSender
from ..utils.validators import find_invalid_emails


logger = logging.getLogger(__name__)

SUMMARIZE_FAILED_MESSAGE = "Failed to generate summary"
SEND_FAILED_MESSAGE = "Failed to send email."
NO_RECIPIENTS_MESSAGE = "No recipients provided."
EMAIL_SENT_MESSAGE = "Email sent successfully!"

# Generic 500 body per relay, also used when a request body cannot be parsed
RELAY_FAILURE_MESSAGES = {
    SUMMARIZE_PATH: SUMMARIZE_FAILED_MESSAGE,
    SEND_EMAIL_PATH: SEND_FAILED_MESSAGE,
}

RelayResult = Tuple[int, Dict[str, str]]


def handle_summarize(summarizer: MeetingSummarizer, transcript: str, prompt: str) -> RelayResult:
    """
    Generate a summary of a transcript.

    A provider response without a completion still returns 200 with a
    placeholder summary (unless strict mode is configured). Any exception
    becomes a generic 500; details stay in the server log.
    """
    try:
        summary = summarizer.summarize(transcript, prompt)
    except Exception as e:
        logger.error(f"Summary generation failed: {e}", exc_info=True)
        return 500, {"error": SUMMARIZE_FAILED_MESSAGE}

    return 200, {"summary": summary}


def handle_send_email(sender: EmailSender, recipients: List[str], summary: str) -> RelayResult:
    """
    Email a summary to a list of recipients.

    Validation short-circuits: empty recipient list first, then malformed
    addresses (all of them listed). Send failures become a generic 500.
    """
    if not recipients:
        return 400, {"error": NO_RECIPIENTS_MESSAGE}

    invalid = find_invalid_emails(recipients)
    if invalid:
        return 400, {"error": f"Invalid emails: {', '.join(invalid)}"}

    try:
        sender.send_summary(recipients, summary)
    except Exception as e:
        logger.error(f"Email sending failed: {e}", exc_info=True)
        return 500, {"error": SEND_FAILED_MESSAGE}

    return 200, {"message": EMAIL_SENT_MESSAGE}


class LocalRelay:
    """
    Runs the relay handlers in the current process.

    Drop-in for RelayClient when the page and the relays are served by the
    same application: no HTTP hop, no worker held while another serves it.
    """

    def __init__(self, summarizer: MeetingSummarizer, sender: EmailSender):
        self.summarizer = summarizer
        self.sender = sender

    def post(self, path: str, payload: Dict[str, Any]) -> Tuple[bool, Dict[str, Any]]:
        if path == SUMMARIZE_PATH:
            status, body = handle_summarize(
                self.summarizer, payload.get("transcript") or "", payload.get("prompt") or ""
            )
        elif path == SEND_EMAIL_PATH:
            status, body = handle_send_email(
                self.sender, list(payload.get("recipients") or []), payload.get("summary") or ""
            )
        else:
            raise ValueError(f"Unknown relay path: {path}")

        return 200 <= status < 300, body
