"""
Unit tests for email validation.
"""

import pytest

from notes_summarizer.utils.validators import find_invalid_emails, is_flagged_recipient, validate_email


@pytest.mark.parametrize("email", [
    "a@b.com",
    "first.last+tag@sub.example.co.uk",
    "user@localhost.localdomain",
    "ü@exämple.de",
])
def test_valid_emails(email):
    assert validate_email(email) is True


@pytest.mark.parametrize("email", [
    "",
    "a@b",
    "a @b.com",
    "a@b .com",
    "a@@b.com",
    "a@b@c.com",
    "@b.com",
    "a@.com",
    "a@b.",
    "plainaddress",
    "a@b.com\n",
    " a@b.com",
])
def test_invalid_emails(email):
    assert validate_email(email) is False


def test_find_invalid_emails_keeps_input_order():
    recipients = ["ok@example.com", "bad", "also@fine.org", "", "x@y"]

    assert find_invalid_emails(recipients) == ["bad", "", "x@y"]


def test_find_invalid_emails_all_valid():
    assert find_invalid_emails(["a@b.com", "c@d.org"]) == []


def test_empty_recipient_is_not_flagged_while_editing():
    assert is_flagged_recipient("") is False
    assert is_flagged_recipient("a@b.com") is False
    assert is_flagged_recipient("a@b") is True
