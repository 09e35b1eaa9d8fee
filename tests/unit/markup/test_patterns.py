"""Unit tests for the fragment pattern registry."""

from xlate_proxy.core.markup.patterns import (
    COLON_PATTERN,
    ENTITY_PATTERN,
    FULLWIDTH_COLON_PATTERN,
    PATTERN_REGISTRY,
    TAG_PATTERN,
    FragmentKind,
)


class TestTagPattern:
    """Test tag matching."""

    def test_opening_and_closing(self):
        assert TAG_PATTERN.findall("<p>x</p>") == ["p", "p"]

    def test_attributes(self):
        match = TAG_PATTERN.search('<a href="x" class=\'y\'>')
        assert match.group(0) == '<a href="x" class=\'y\'>'
        assert match.group('name') == "a"

    def test_name_must_start_with_letter(self):
        assert TAG_PATTERN.search("<1p>") is None
        assert TAG_PATTERN.search("< p>") is None

    def test_alphanumeric_names(self):
        assert TAG_PATTERN.search("<h1>").group('name') == "h1"


class TestEntityPattern:
    """Test entity matching."""

    def test_named(self):
        assert ENTITY_PATTERN.findall("&amp; &nbsp; &frac12;") == ["&amp;", "&nbsp;", "&frac12;"]

    def test_numeric(self):
        assert ENTITY_PATTERN.findall("&#39; &#x2014; &#xA9;") == ["&#39;", "&#x2014;", "&#xA9;"]

    def test_requires_semicolon(self):
        assert ENTITY_PATTERN.search("&amp") is None
        assert ENTITY_PATTERN.search("&#;") is None


class TestColonPatterns:
    """Test colon matching."""

    def test_ascii_colon_only(self):
        assert COLON_PATTERN.findall("a:b：c") == [":"]

    def test_fullwidth_colon_only(self):
        assert FULLWIDTH_COLON_PATTERN.findall("a:b：c") == ["："]


class TestRegistry:
    """Test registry ordering."""

    def test_order(self):
        """Tags, then entities, then colons."""
        assert [kind for kind, _ in PATTERN_REGISTRY] == [
            FragmentKind.TAG,
            FragmentKind.ENTITY,
            FragmentKind.COLON,
        ]
