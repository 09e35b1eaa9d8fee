"""Utility functions for HTML found in text sent to or returned by translators.

Neither function parses HTML. Both work on pattern matches only.
"""

from typing import AbstractSet, Optional

from xlate_proxy.config import SAFE_TAGS
from xlate_proxy.core.markup.patterns import ENTITY_PATTERN, TAG_PATTERN


def contains_html_content(text: str) -> bool:
    """
    Check if text contains tags or entities worth preserving.

    Colons alone do not count. ``re.search`` always scans from the start of
    the string, so repeated calls cannot skip matches.

    Args:
        text: The text to check

    Returns:
        True if the text contains a tag or an entity
    """
    return TAG_PATTERN.search(text) is not None or ENTITY_PATTERN.search(text) is not None


def sanitize_html_content(text: str, safe_tags: Optional[AbstractSet[str]] = None) -> str:
    """
    Remove every tag whose name is not on the allow-list.

    Only the tag itself is removed; the text between an opening and closing
    tag stays. Attributes of allowed tags are kept as they are without any
    inspection, so ``<span onclick="...">`` survives.

    Args:
        text: The text to sanitize
        safe_tags: Lowercase tag names to keep. Defaults to SAFE_TAGS.

    Returns:
        Sanitized text with safe HTML preserved

    Example:
        >>> sanitize_html_content("<script>x</script><b>y</b>")
        'x<b>y</b>'
    """
    allowed = SAFE_TAGS if safe_tags is None else safe_tags

    def keep_safe_tag(match) -> str:
        if match.group('name').lower() in allowed:
            return match.group(0)
        return ""

    return TAG_PATTERN.sub(keep_safe_tag, text)
