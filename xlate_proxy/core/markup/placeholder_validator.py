"""
Token validation for translated text.

Checks whether the tokens minted by the encoder survived the translation
step, before the text is decoded.
"""

from typing import List, Tuple

from xlate_proxy.common.placeholder_format import PlaceholderFormat
from .exceptions import PlaceholderValidationError
from .record import PreservationRecord


class PlaceholderValidator:
    """Validates token integrity in translated text."""

    @staticmethod
    def validate_basic(text: str, record: PreservationRecord) -> bool:
        """Quick validation: check all tokens are present in any casing.

        Args:
            text: Translated text containing tokens
            record: Record from the encoder

        Returns:
            True if all tokens present, False otherwise
        """
        for placeholder in record.tokens():
            if not PlaceholderFormat.token_regex(placeholder).search(text):
                return False
        return True

    @staticmethod
    def get_missing_placeholders(
        text: str,
        record: PreservationRecord
    ) -> List[str]:
        """Get list of tokens absent from text in every casing."""
        missing = []
        for placeholder in record.tokens():
            if not PlaceholderFormat.token_regex(placeholder).search(text):
                missing.append(placeholder)
        return missing

    @staticmethod
    def get_case_mutated_placeholders(
        text: str,
        record: PreservationRecord
    ) -> List[Tuple[str, str]]:
        """Get tokens that only appear with altered casing.

        Returns:
            List of (original, mutated) tuples, first mutated form found
        """
        mutated = []
        for placeholder in record.tokens():
            if placeholder in text:
                continue
            match = PlaceholderFormat.token_regex(placeholder).search(text)
            if match:
                mutated.append((placeholder, match.group(0)))
        return mutated

    @staticmethod
    def ensure_complete(text: str, record: PreservationRecord) -> None:
        """Raise if any token is missing.

        Raises:
            PlaceholderValidationError: If one or more tokens are missing
        """
        missing = PlaceholderValidator.get_missing_placeholders(text, record)
        if missing:
            expected = len(record)
            raise PlaceholderValidationError(
                f"{len(missing)} of {expected} placeholders lost in translation",
                expected_count=expected,
                actual_count=expected - len(missing),
                missing_placeholders=missing
            )
