"""
Custom exceptions for the Meeting Notes Summarizer.
"""


class NotesSummarizerException(Exception):
    """Base exception for all custom exceptions."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(NotesSummarizerException):
    """Configuration is invalid or missing."""

    pass


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationError(NotesSummarizerException):
    """User-supplied input failed validation (recoverable locally)."""

    pass


class UnsupportedFileTypeError(ValidationError):
    """Uploaded file extension is not in the allow-list."""

    def __init__(self, file_name: str, extension: str):
        super().__init__(f"Unsupported file type: {extension or '(none)'} ({file_name})")
        self.file_name = file_name
        self.extension = extension


class DocumentExtractionError(ValidationError):
    """Uploaded document could not be parsed."""

    pass


# ============================================================================
# Upstream Provider Exceptions
# ============================================================================


class UpstreamProviderError(NotesSummarizerException):
    """A third-party provider failed or returned an unusable response."""

    pass


class CompletionAPIError(UpstreamProviderError):
    """Error communicating with the chat-completion API."""

    pass


class SummaryGenerationError(CompletionAPIError):
    """Completion response did not contain a summary."""

    pass


class DistributionError(UpstreamProviderError):
    """Distribution failed."""

    pass


class EmailSendError(DistributionError):
    """Failed to send email."""

    pass
