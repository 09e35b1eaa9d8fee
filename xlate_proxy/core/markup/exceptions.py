"""
Custom exceptions for the markup preservation pipeline.

The core encode/decode/detect/sanitize operations never raise these; they are
used by the validator and by the translation pipeline helpers.
"""


class MarkupPreservationError(Exception):
    """Base exception for all markup preservation errors."""
    pass


class PlaceholderValidationError(MarkupPreservationError):
    """Raised when tokens did not survive the translation step.

    Attributes:
        message: Error description
        expected_count: Number of tokens in the preservation record
        actual_count: Number of those tokens found in the translated text
        missing_placeholders: List of missing tokens
    """
    def __init__(
        self,
        message: str,
        expected_count: int = None,
        actual_count: int = None,
        missing_placeholders: list = None
    ):
        super().__init__(message)
        self.expected_count = expected_count
        self.actual_count = actual_count
        self.missing_placeholders = missing_placeholders or []


class TranslationStepError(MarkupPreservationError):
    """Raised when the caller-supplied translate function fails.

    Attributes:
        original_error: The exception raised by the translate function
    """
    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message)
        self.original_error = original_error
