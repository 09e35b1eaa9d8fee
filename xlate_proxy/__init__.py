"""
xlate-proxy: keeps HTML markup intact across translation service calls.

    from xlate_proxy import encode, decode

    processed, record = encode("<b>Note</b>: hello")
    translated = some_translation_service(processed)
    result = decode(translated, record)
"""

from xlate_proxy.config import MarkupConfig
from xlate_proxy.core.markup import (
    MarkupPreserver,
    PreservationRecord,
    atranslate_preserving,
    contains_html_content,
    sanitize_html_content,
    translate_preserving,
)

# Colon tokenizing and full-width repair always on, whatever the env says
_standard_preserver = MarkupPreserver(
    MarkupConfig(preserve_colons=True, repair_fullwidth_colons=True)
)

detect = contains_html_content
encode = _standard_preserver.preserve
decode = _standard_preserver.restore
sanitize = sanitize_html_content

__all__ = [
    'detect',
    'encode',
    'decode',
    'sanitize',
    'MarkupPreserver',
    'PreservationRecord',
    'translate_preserving',
    'atranslate_preserving',
]
