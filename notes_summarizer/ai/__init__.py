"""
AI Module

Chat-completion client and the meeting summarizer built on it.
"""

from .completion_client import ChatCompletionClient
from .summarizer import MeetingSummarizer

__all__ = ["ChatCompletionClient", "MeetingSummarizer"]
