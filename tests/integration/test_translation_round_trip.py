"""
Integration test: simulated translation service that misbehaves the way
real ones do (lowercasing tokens, inserting full-width colons, translating
the surrounding words).
"""

import re

import pytest

from xlate_proxy import atranslate_preserving, decode, detect, encode, sanitize, translate_preserving
from xlate_proxy.core.markup.placeholder_validator import PlaceholderValidator

GLOSSARY = {
    "Warning": "警告",
    "Bold": "粗体",
    "and": "和",
    "italic": "斜体",
    "code here": "这里的代码",
}


def fake_chinese_translator(text: str) -> str:
    """Translate glossary words, lowercase everything, add a full-width colon."""
    for source, target in GLOSSARY.items():
        text = text.replace(source, target)
    return text.lower() + "：完"


class TestRoundTrip:
    """End-to-end encode, translate and decode."""

    def test_markup_survives_misbehaving_translator(self):
        original = "<strong>Bold</strong> and <em>italic</em>: <code>code here</code>"

        processed, record = encode(original)
        translated = fake_chinese_translator(processed)

        assert PlaceholderValidator.validate_basic(translated, record)
        assert PlaceholderValidator.get_case_mutated_placeholders(translated, record)

        result = decode(translated, record)

        assert result == "<strong>粗体</strong> 和 <em>斜体</em>: <code>这里的代码</code>:完"

    def test_helper_matches_manual_steps(self):
        original = "<p>Warning: &lt;b&gt; is escaped</p>"

        processed, record = encode(original)
        manual = decode(fake_chinese_translator(processed), record)

        assert translate_preserving(original, fake_chinese_translator) == manual
        assert manual.startswith("<p>警告: &lt;b&gt;")

    @pytest.mark.asyncio
    async def test_async_helper(self):
        async def translate(text):
            return fake_chinese_translator(text)

        result = await atranslate_preserving("<b>Warning</b>", translate)
        assert result == "<b>警告</b>:完"

    def test_detect_then_sanitize_output(self):
        translated = translate_preserving(
            "<script>steal()</script><strong>Bold</strong>",
            fake_chinese_translator,
        )

        assert detect(translated) is True
        cleaned = sanitize(translated)
        assert "<script>" not in cleaned
        assert "<strong>粗体</strong>" in cleaned
        assert re.search(r"</?script", cleaned) is None


class TestPackageDefaults:
    """Package-level encode/decode ignore the env colon switches."""

    def test_encode_tokenizes_colons_when_env_disables_them(self, monkeypatch):
        from xlate_proxy.core.markup import tag_preservation
        from xlate_proxy.config import MarkupConfig

        monkeypatch.setattr(
            tag_preservation,
            "_default_preserver",
            tag_preservation.MarkupPreserver(
                MarkupConfig(preserve_colons=False, repair_fullwidth_colons=False)
            ),
        )
        original = "<b>Note</b>: 10:30"

        env_text, _ = tag_preservation.preserve_html_content(original)
        processed, record = encode(original)

        assert ":" in env_text
        assert ":" not in processed
        assert decode(processed, record) == original
        assert decode(processed + "：", record) == original + ":"
