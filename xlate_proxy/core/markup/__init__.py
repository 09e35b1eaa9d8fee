"""
Markup preservation around translation calls.

Provides tag/entity/colon protection (encode and decode), a detector and an
allow-list sanitizer.
"""

from .exceptions import (
    MarkupPreservationError,
    PlaceholderValidationError,
    TranslationStepError,
)
from .html_utils import contains_html_content, sanitize_html_content
from .patterns import FragmentKind
from .pipeline import atranslate_preserving, translate_preserving
from .placeholder_validator import PlaceholderValidator
from .record import PreservationRecord
from .tag_preservation import (
    MarkupPreserver,
    preserve_html_content,
    restore_html_content,
)

__all__ = [
    'MarkupPreservationError',
    'PlaceholderValidationError',
    'TranslationStepError',
    'contains_html_content',
    'sanitize_html_content',
    'FragmentKind',
    'atranslate_preserving',
    'translate_preserving',
    'PlaceholderValidator',
    'PreservationRecord',
    'MarkupPreserver',
    'preserve_html_content',
    'restore_html_content',
]
