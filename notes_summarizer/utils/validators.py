"""
Input validation utilities.
"""

import re
from typing import Iterable, List


# local-part@domain.tld with no whitespace and no extra '@'
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_email(email: str) -> bool:
    """
    Validate email address format.

    No DNS or mailbox verification is performed.

    Args:
        email: Email address to validate

    Returns:
        True if valid, False otherwise

    Example:
        validate_email("a@b.com") -> True
        validate_email("a@b") -> False
        validate_email("a @b.com") -> False
    """
    if not email:
        return False

    return EMAIL_PATTERN.fullmatch(email) is not None


def find_invalid_emails(recipients: Iterable[str]) -> List[str]:
    """
    Return the recipients that fail validate_email, in input order.

    Example:
        find_invalid_emails(["a@b.com", "bad", ""]) -> ["bad", ""]
    """
    return [r for r in recipients if not validate_email(r)]


def is_flagged_recipient(email: str) -> bool:
    """Live field feedback: an empty entry is neutral, anything else must be valid."""
    return email != "" and not validate_email(email)
