"""
Mail Module

SMTP delivery of meeting summaries.
"""

from .sender import EmailSender

__all__ = ["EmailSender"]
