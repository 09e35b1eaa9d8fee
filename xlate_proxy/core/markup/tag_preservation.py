"""
Markup preservation for translation services

This module protects HTML tags, HTML entities and colons from being altered
by a translation service. Every such fragment is swapped for an opaque token
before translation and put back afterwards.
"""
import logging
import re
from typing import Optional, Tuple

from xlate_proxy.common.placeholder_format import PlaceholderFormat
from xlate_proxy.config import ASCII_COLON, MarkupConfig
from xlate_proxy.core.markup.html_utils import sanitize_html_content
from xlate_proxy.core.markup.patterns import (
    FULLWIDTH_COLON_PATTERN,
    PATTERN_REGISTRY,
    FragmentKind,
)
from xlate_proxy.core.markup.record import PreservationRecord

logger = logging.getLogger(__name__)


class MarkupPreserver:
    """
    Replaces markup fragments with tokens before translation and restores
    them afterwards

    ``<strong>A</strong>: B`` becomes
    ``ĦĐŁXĦ000ĦĐŁXĦAĦĐŁXĦ001ĦĐŁXĦĦĐŁXĦ002ĦĐŁXĦ B`` for the translator, and the
    returned PreservationRecord maps each token back to its fragment.

    The preserver holds configuration only. Each call to ``preserve`` returns
    a fresh record, so one instance can serve concurrent requests.
    """

    def __init__(self, config: Optional[MarkupConfig] = None,
                 placeholder_format: Optional[PlaceholderFormat] = None):
        self.config = config or MarkupConfig()
        self.format = placeholder_format or PlaceholderFormat.from_config()

    def preserve(self, text: str) -> Tuple[str, PreservationRecord]:
        """
        Replace tags, entities and colons with tokens

        Each pass runs on the output of the previous one, so fragments
        already swapped out are never seen again.

        Args:
            text: Text containing HTML content

        Returns:
            Tuple of (processed_text, record)

        Example:
            >>> preserver = MarkupPreserver()
            >>> text, record = preserver.preserve("<em>Hi</em>")
            >>> text
            'ĦĐŁXĦ000ĦĐŁXĦHiĦĐŁXĦ001ĦĐŁXĦ'
        """
        record = PreservationRecord()
        processed_text = text

        for kind, pattern in PATTERN_REGISTRY:
            if kind is FragmentKind.COLON and not self.config.preserve_colons:
                continue

            def replace_fragment(match: re.Match, kind: FragmentKind = kind) -> str:
                return record.mint(match.group(0), kind, self.format)

            processed_text = pattern.sub(replace_fragment, processed_text)

        if record.counter > 10 ** self.format.width:
            logger.debug(
                f"Record minted {record.counter} tokens, ordinals widened past "
                f"{self.format.width} digits"
            )
        if len(record):
            logger.debug(
                f"Preserved {record.kind_counts[FragmentKind.TAG]} tags, "
                f"{record.kind_counts[FragmentKind.ENTITY]} entities, "
                f"{record.kind_counts[FragmentKind.COLON]} colons"
            )

        return processed_text, record

    def restore(self, text: str, record: PreservationRecord) -> str:
        """
        Put the original fragments back in place of their tokens

        Tokens are matched case-insensitively since translation services
        sometimes re-case text they leave untranslated. Tokens missing from
        ``text`` are skipped, and token-shaped text the record does not know
        is left as it is. Afterwards any full-width colon is rewritten to
        an ASCII colon, including ones the source text really contained.

        A string in the translated output that happens to look exactly like
        a token is restored as that token's fragment. Nothing detects this.

        Args:
            text: Translated text with tokens
            record: Record returned by ``preserve`` for the original text

        Returns:
            Text with restored HTML content
        """
        lookup = {placeholder.casefold(): original for placeholder, original in record.items()}
        restored = 0

        def restore_token(match: re.Match) -> str:
            nonlocal restored
            original = lookup.get(match.group(0).casefold())
            if original is None:
                return match.group(0)
            restored += 1
            # Function replacement keeps backslashes in the fragment literal
            return original

        # Each match consumes a whole token, so digits sitting between two
        # tokens never join their delimiters into a third one
        restored_text, _ = self.format.substitute(restore_token, text)

        if self.config.repair_fullwidth_colons:
            restored_text = FULLWIDTH_COLON_PATTERN.sub(ASCII_COLON, restored_text)

        if len(record):
            logger.debug(f"Restored {restored} token occurrences from {len(record)} record entries")

        return restored_text

    def sanitize(self, text: str) -> str:
        """Strip tags not on this preserver's allow-list."""
        return sanitize_html_content(text, self.config.safe_tags)


_default_preserver = MarkupPreserver()


def preserve_html_content(text: str) -> Tuple[str, PreservationRecord]:
    """
    Encode ``text`` with the env-configured defaults

    Follows ``PRESERVE_COLONS``: with it switched off, colons stay in the
    processed text. ``xlate_proxy.encode`` always tokenizes colons.
    """
    return _default_preserver.preserve(text)


def restore_html_content(translated_text: str, record: PreservationRecord) -> str:
    """
    Decode ``translated_text`` with the env-configured defaults

    Follows ``REPAIR_FULLWIDTH_COLONS``. ``xlate_proxy.decode`` always repairs.
    """
    return _default_preserver.restore(translated_text, record)
