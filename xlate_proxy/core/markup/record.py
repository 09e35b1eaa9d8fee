"""
Preservation record linking tokens back to the fragments they replaced.

A record belongs to exactly one encode/decode cycle. It is created by the
encoder, handed back to the caller, and read (never written) by the decoder.
"""
from dataclasses import dataclass, field
from typing import Dict, ItemsView, List, Optional

from xlate_proxy.common.placeholder_format import PlaceholderFormat
from xlate_proxy.core.markup.patterns import FragmentKind


@dataclass
class PreservationRecord:
    """Ordered token -> original fragment mapping plus the mint counter"""

    placeholders: Dict[str, str] = field(default_factory=dict)
    counter: int = 0
    kind_counts: Dict[FragmentKind, int] = field(
        default_factory=lambda: {kind: 0 for kind in FragmentKind}
    )

    def mint(self, fragment: str, kind: FragmentKind, fmt: PlaceholderFormat) -> str:
        """
        Create the next token for ``fragment`` and remember it.

        Args:
            fragment: Original text the token stands in for
            kind: Fragment class, used for statistics only
            fmt: Token format

        Returns:
            The new token
        """
        placeholder = fmt.create(self.counter)
        self.placeholders[placeholder] = fragment
        self.kind_counts[kind] += 1
        self.counter += 1
        return placeholder

    def items(self) -> ItemsView[str, str]:
        """(token, original) pairs in mint order"""
        return self.placeholders.items()

    def tokens(self) -> List[str]:
        return list(self.placeholders)

    def original(self, placeholder: str) -> Optional[str]:
        """Look up the fragment for a token in any casing."""
        if placeholder in self.placeholders:
            return self.placeholders[placeholder]
        folded = placeholder.casefold()
        for token, fragment in self.placeholders.items():
            if token.casefold() == folded:
                return fragment
        return None

    def __len__(self) -> int:
        return len(self.placeholders)

    def __bool__(self) -> bool:
        # An empty record is still a valid record
        return True
