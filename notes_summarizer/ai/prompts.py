"""
Prompt templates for meeting summarization.
"""

from typing import Dict, List


SUMMARY_SYSTEM_PROMPT = "You are a meeting notes summarizer."


def build_summary_messages(transcript: str, instruction: str) -> List[Dict[str, str]]:
    """
    Build the chat conversation for a summary request.

    The transcript and the user's instruction travel as two separate user
    turns after the fixed system prompt.

    Args:
        transcript: Meeting transcript text
        instruction: Free-text directive controlling summary style/format

    Returns:
        Messages array for the chat-completion API
    """
    return [
        {"role": "system", "content": SUMMARY_SYSTEM_PROMPT},
        {"role": "user", "content": f"Transcript: {transcript}"},
        {"role": "user", "content": f"Instruction: {instruction}"},
    ]
