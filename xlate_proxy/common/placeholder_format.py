"""
Centralized token format detection and manipulation.

This module provides a unified interface for working with placeholder
tokens, so the encoder, decoder and validator agree on a single format.
"""
import re
from typing import Callable, List, Optional, Tuple

from xlate_proxy.config import (
    PLACEHOLDER_PREFIX,
    PLACEHOLDER_SUFFIX,
    PLACEHOLDER_ORDINAL_WIDTH,
)


class PlaceholderFormat:
    """
    Encapsulates token format creation, parsing and matching.

    All matching is case-insensitive: translation services are known to
    lowercase (or otherwise re-case) tokens they cannot translate.

    Example:
        >>> fmt = PlaceholderFormat.from_config()
        >>> fmt.create(5)
        'ĦĐŁXĦ005ĦĐŁXĦ'
        >>> fmt.parse('ħđłxħ042ħđłxħ')
        42
        >>> fmt.matches('ĦĐŁXĦ999ĦĐŁXĦ')
        True
    """

    def __init__(self, prefix: str, suffix: str, width: int = PLACEHOLDER_ORDINAL_WIDTH):
        """
        Initialize token format.

        Args:
            prefix: Token prefix (e.g., "ĦĐŁXĦ")
            suffix: Token suffix (e.g., "ĦĐŁXĦ")
            width: Minimum number of digits in the ordinal
        """
        self.prefix = prefix
        self.suffix = suffix
        self.width = width
        self.pattern = rf'{re.escape(prefix)}(\d{{{width},}}){re.escape(suffix)}'
        self._compiled_pattern = re.compile(self.pattern, re.IGNORECASE)

    @classmethod
    def from_config(cls) -> 'PlaceholderFormat':
        """
        Create PlaceholderFormat from global config constants.

        Returns:
            PlaceholderFormat instance with the default delimiter format
        """
        return cls(PLACEHOLDER_PREFIX, PLACEHOLDER_SUFFIX, PLACEHOLDER_ORDINAL_WIDTH)

    def create(self, index: int) -> str:
        """
        Create a token for the given ordinal.

        The ordinal is zero-padded to ``width`` digits and simply grows wider
        once it no longer fits, so ordinals never wrap around.

        Example:
            >>> fmt = PlaceholderFormat.from_config()
            >>> fmt.create(42)
            'ĦĐŁXĦ042ĦĐŁXĦ'
            >>> fmt.create(1000)
            'ĦĐŁXĦ1000ĦĐŁXĦ'
        """
        return f"{self.prefix}{index:0{self.width}d}{self.suffix}"

    def parse(self, placeholder: str) -> Optional[int]:
        """
        Extract the ordinal from a token string.

        Returns:
            Ordinal as integer, or None if invalid
        """
        match = self._compiled_pattern.fullmatch(placeholder)
        if match:
            return int(match.group(1))
        return None

    def matches(self, text: str) -> bool:
        """Check if text is exactly one token (any casing)."""
        return self._compiled_pattern.fullmatch(text) is not None

    def find_all(self, text: str) -> List[Tuple[int, int, str, int]]:
        """
        Find all tokens in text.

        Returns:
            List of (start_pos, end_pos, token_text, index) tuples

        Example:
            >>> fmt = PlaceholderFormat.from_config()
            >>> fmt.find_all("ĦĐŁXĦ000ĦĐŁXĦHello")
            [(0, 13, 'ĦĐŁXĦ000ĦĐŁXĦ', 0)]
        """
        results = []
        for match in self._compiled_pattern.finditer(text):
            results.append((
                match.start(),
                match.end(),
                match.group(0),
                int(match.group(1))
            ))
        return results

    def substitute(self, repl: Callable[[re.Match], str], text: str) -> Tuple[str, int]:
        """Replace every token in text via ``repl`` in one left-to-right scan."""
        return self._compiled_pattern.subn(repl, text)

    def remove_all(self, text: str) -> str:
        """Remove all tokens from text."""
        return self._compiled_pattern.sub('', text)

    def get_max_index(self, text: str) -> Optional[int]:
        """Find the highest token ordinal in text, or None if there is none."""
        placeholders = self.find_all(text)
        if not placeholders:
            return None
        return max(idx for _, _, _, idx in placeholders)

    @staticmethod
    def token_regex(placeholder: str) -> 're.Pattern':
        """
        Compile a case-insensitive pattern matching one literal token.

        A fresh pattern is built per call; compiled patterns carry no scan
        position, so nothing leaks between calls.
        """
        return re.compile(re.escape(placeholder), re.IGNORECASE)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"PlaceholderFormat(prefix={self.prefix!r}, suffix={self.suffix!r}, width={self.width})"

    def __eq__(self, other) -> bool:
        """Equality comparison."""
        if not isinstance(other, PlaceholderFormat):
            return False
        return (self.prefix == other.prefix and
                self.suffix == other.suffix and
                self.width == other.width)
