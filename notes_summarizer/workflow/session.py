"""
Session State and Transitions

The page's whole working state lives in one immutable SessionState.
Every UI event is a pure function from a state snapshot to a new one,
plus the toast notifications the event produced.
"""

from dataclasses import dataclass, field, replace
from typing import Tuple

from ..core.exceptions import DocumentExtractionError, UnsupportedFileTypeError
from ..documents.extractor import extract_text
from ..utils.validators import find_invalid_emails


UNSUPPORTED_FILE_MESSAGE = "Unsupported file type. Please upload .txt or .docx"
NO_FILE_MESSAGE = "Please choose a transcript file to upload."
GENERATE_PRECONDITION_MESSAGE = "Please upload a transcript and enter an instruction."
SEND_PRECONDITION_MESSAGE = "Please add at least one recipient and generate summary first."


@dataclass(frozen=True)
class Notification:
    """A transient toast shown to the user."""

    level: str  # success | error | warning
    message: str


@dataclass(frozen=True)
class SessionState:
    """Transient state of one page session (never persisted)."""

    transcript_text: str = ""
    instruction_text: str = ""
    summary_text: str = ""
    recipients: Tuple[str, ...] = ()
    file_name: str = ""
    generating: bool = False
    sending: bool = False


@dataclass(frozen=True)
class TransitionResult:
    """New state snapshot plus the notifications the transition raised."""

    state: SessionState
    notifications: Tuple[Notification, ...] = field(default_factory=tuple)


def _notify(state: SessionState, level: str, message: str) -> TransitionResult:
    return TransitionResult(state, (Notification(level, message),))


# ============================================================================
# Upload
# ============================================================================


def upload(state: SessionState, file_name: str, data: bytes) -> TransitionResult:
    """Extract the transcript from an uploaded file; failures leave the state untouched."""
    if not file_name:
        return _notify(state, "warning", NO_FILE_MESSAGE)

    try:
        text = extract_text(file_name, data)
    except UnsupportedFileTypeError:
        return _notify(state, "warning", UNSUPPORTED_FILE_MESSAGE)
    except DocumentExtractionError as e:
        return _notify(state, "error", str(e))

    return TransitionResult(replace(state, transcript_text=text, file_name=file_name))


# ============================================================================
# Recipients
# ============================================================================


def add_recipient(state: SessionState) -> SessionState:
    return replace(state, recipients=state.recipients + ("",))


def remove_recipient(state: SessionState, index: int) -> SessionState:
    if not 0 <= index < len(state.recipients):
        return state
    recipients = state.recipients[:index] + state.recipients[index + 1:]
    return replace(state, recipients=recipients)


def edit_recipient(state: SessionState, index: int, value: str) -> SessionState:
    if not 0 <= index < len(state.recipients):
        return state
    recipients = list(state.recipients)
    recipients[index] = value
    return replace(state, recipients=tuple(recipients))


# ============================================================================
# Generate
# ============================================================================


def begin_generate(state: SessionState) -> TransitionResult:
    """
    Check the generate preconditions and mark the request in flight.

    The returned state has ``generating`` set only when the relay call
    should be issued; the prior summary is cleared at that point.
    """
    if state.generating:
        return TransitionResult(state)

    if not state.transcript_text or not state.instruction_text:
        return _notify(state, "error", GENERATE_PRECONDITION_MESSAGE)

    return TransitionResult(replace(state, generating=True, summary_text=""))


def generate_succeeded(state: SessionState, summary: str) -> TransitionResult:
    return TransitionResult(replace(state, generating=False, summary_text=summary))


def generate_failed(state: SessionState, message: str) -> TransitionResult:
    return _notify(replace(state, generating=False), "error", message)


# ============================================================================
# Send
# ============================================================================


def begin_send(state: SessionState) -> TransitionResult:
    """
    Check the send preconditions and mark the request in flight.

    Recipients are re-validated here even though the relay validates them
    again on its side.
    """
    if state.sending:
        return TransitionResult(state)

    if not state.recipients or not state.summary_text:
        return _notify(state, "error", SEND_PRECONDITION_MESSAGE)

    invalid = find_invalid_emails(state.recipients)
    if invalid:
        return _notify(state, "error", f"Invalid email(s): {', '.join(invalid)}")

    return TransitionResult(replace(state, sending=True))


def send_succeeded(state: SessionState, message: str) -> TransitionResult:
    return _notify(replace(state, sending=False, recipients=()), "success", message)


def send_failed(state: SessionState, message: str) -> TransitionResult:
    return _notify(replace(state, sending=False), "error", message)
