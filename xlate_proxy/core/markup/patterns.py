"""
Fragment patterns protected from translation.

Order in ``PATTERN_REGISTRY`` is the order the encoder runs its passes:
tags first so entity-like text inside attribute values goes with its tag,
then entities, then whatever colons are left.
"""
import re
from enum import Enum
from typing import Tuple

from xlate_proxy.config import ASCII_COLON, FULLWIDTH_COLON


class FragmentKind(Enum):
    """Classes of protected fragments"""
    TAG = "tag"
    ENTITY = "entity"
    COLON = "colon"


# Opening or closing tag: <, optional /, letter-led name, optional attributes, >
TAG_PATTERN: re.Pattern = re.compile(r'</?(?P<name>[a-zA-Z][a-zA-Z0-9]*)(?:\s+[^>]*)?>')

# Named (&amp;), decimal (&#39;) or hex (&#x27;) references
ENTITY_PATTERN: re.Pattern = re.compile(r'&(?:[a-zA-Z][a-zA-Z0-9]*|#(?:\d+|x[0-9a-fA-F]+));')

COLON_PATTERN: re.Pattern = re.compile(re.escape(ASCII_COLON))

# Only used when repairing decoded text, never while encoding
FULLWIDTH_COLON_PATTERN: re.Pattern = re.compile(re.escape(FULLWIDTH_COLON))

PATTERN_REGISTRY: Tuple[Tuple[FragmentKind, re.Pattern], ...] = (
    (FragmentKind.TAG, TAG_PATTERN),
    (FragmentKind.ENTITY, ENTITY_PATTERN),
    (FragmentKind.COLON, COLON_PATTERN),
)
