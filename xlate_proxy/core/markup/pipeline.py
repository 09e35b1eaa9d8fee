"""
Encode -> translate -> decode round trip around a caller-supplied translator.

The translate callable is whatever talks to the translation service; this
module never performs I/O itself.
"""
import inspect
import logging
from typing import Awaitable, Callable, Optional, Tuple, Union

from xlate_proxy.config import MarkupConfig
from .exceptions import TranslationStepError
from .placeholder_validator import PlaceholderValidator
from .record import PreservationRecord
from .tag_preservation import MarkupPreserver

logger = logging.getLogger(__name__)

TranslateFn = Callable[[str], str]
AsyncTranslateFn = Callable[[str], Union[str, Awaitable[str]]]


def _prepare(text: str, config: Optional[MarkupConfig]) -> Tuple[MarkupPreserver, str, PreservationRecord]:
    preserver = MarkupPreserver(config)
    processed_text, record = preserver.preserve(text)
    return preserver, processed_text, record


def _finish(preserver: MarkupPreserver, translated: str, record: PreservationRecord) -> str:
    if preserver.config.strict_placeholder_check:
        PlaceholderValidator.ensure_complete(translated, record)
    else:
        missing = PlaceholderValidator.get_missing_placeholders(translated, record)
        if missing:
            logger.warning(
                f"{len(missing)} of {len(record)} placeholders missing after translation: "
                f"{', '.join(missing[:5])}{'...' if len(missing) > 5 else ''}"
            )
    return preserver.restore(translated, record)


def translate_preserving(text: str, translate: TranslateFn,
                         config: Optional[MarkupConfig] = None) -> str:
    """
    Translate text while keeping its tags, entities and colons intact.

    Args:
        text: Source text, may contain HTML
        translate: Callable sending text to a translation service
        config: Optional per-call switches

    Returns:
        Translated text with the original markup restored

    Raises:
        TranslationStepError: If ``translate`` raises
        PlaceholderValidationError: In strict mode, if tokens went missing
    """
    if not text:
        return text

    preserver, processed_text, record = _prepare(text, config)
    try:
        translated = translate(processed_text)
    except Exception as e:
        raise TranslationStepError(f"Translate function failed: {e}", original_error=e) from e

    return _finish(preserver, translated, record)


async def atranslate_preserving(text: str, translate: AsyncTranslateFn,
                                config: Optional[MarkupConfig] = None) -> str:
    """Async variant of translate_preserving; ``translate`` may be sync or async."""
    if not text:
        return text

    preserver, processed_text, record = _prepare(text, config)
    try:
        translated = translate(processed_text)
        if inspect.isawaitable(translated):
            translated = await translated
    except Exception as e:
        raise TranslationStepError(f"Translate function failed: {e}", original_error=e) from e

    return _finish(preserver, translated, record)
