"""
Email Sender

Sends meeting summaries as plain-text email through an SMTP relay
(Gmail by default) using the credentials from EmailConfig.
"""

import logging
import smtplib
import ssl
from email.message import EmailMessage
from typing import List

from ..core.config import EmailConfig
from ..core.exceptions import EmailSendError


logger = logging.getLogger(__name__)

SUMMARY_SUBJECT = "AI Meeting Summary"


class EmailSender:
    """
    Sends emails via SMTP.

    One message is sent per call, addressed to every recipient at once.
    Recipients are expected to be validated by the caller.

    Usage:
        sender = EmailSender(config.email)
        sender.send_summary(["a@example.com"], "Summary text...")
    """

    def __init__(self, config: EmailConfig):
        """
        Initialize email sender.

        Args:
            config: EmailConfig with SMTP host and login
        """
        self.config = config

    def build_message(self, recipients: List[str], body: str, subject: str = SUMMARY_SUBJECT) -> EmailMessage:
        """Build the plain-text message (body is used verbatim)."""
        msg = EmailMessage()
        msg["From"] = self.config.sender
        msg["To"] = ", ".join(recipients)
        msg["Subject"] = subject
        msg.set_content(body)
        return msg

    def send_summary(self, recipients: List[str], summary: str) -> None:
        """
        Send a meeting summary.

        Args:
            recipients: Recipient email addresses
            summary: Summary text (sent as the plain-text body)

        Raises:
            EmailSendError: If the SMTP exchange fails
        """
        msg = self.build_message(recipients, summary)

        try:
            logger.info(f"Sending meeting summary to {len(recipients)} recipient(s) via {self.config.host}")

            with smtplib.SMTP(self.config.host, self.config.port, timeout=self.config.timeout_seconds) as server:
                if self.config.use_tls:
                    server.starttls(context=ssl.create_default_context())
                if self.config.user:
                    server.login(self.config.user, self.config.password)
                server.send_message(msg, from_addr=self.config.sender, to_addrs=recipients)

            logger.info("✓ Email sent successfully")

        except (smtplib.SMTPException, OSError) as e:
            raise EmailSendError(f"Email send failed: {e}") from e
