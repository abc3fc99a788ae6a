"""
AI Meeting Notes Summarizer

Upload a meeting transcript, summarize it with a chat-completion model,
edit the result and email it to a list of recipients.
"""

__version__ = "1.0.0"
