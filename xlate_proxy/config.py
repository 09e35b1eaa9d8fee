"""
Centralized configuration
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import FrozenSet
from dotenv import load_dotenv

# Setup debug logger for configuration
_config_logger = logging.getLogger('config')

# Check for DEBUG_MODE early (before .env is loaded, check environment)
_debug_mode = os.getenv('DEBUG_MODE', 'false').lower() == 'true'
if _debug_mode:
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    _config_logger.setLevel(logging.DEBUG)
    _config_logger.debug("DEBUG_MODE enabled - verbose logging active")

# .env lives in the current working directory
_env_file = Path.cwd() / '.env'

if _env_file.exists():
    _dotenv_result = load_dotenv(_env_file)
    if _debug_mode:
        _config_logger.debug(f"Loaded .env from: {_env_file.absolute()} ({_dotenv_result})")
elif _debug_mode:
    _config_logger.debug(f"No .env at {_env_file.absolute()}, using defaults")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


# ============================================================================
# SAFE TAG ALLOW-LIST
# ============================================================================
# Tag names kept by the sanitizer. Anything else matching the tag pattern is
# stripped. Comparison is case-insensitive.

DEFAULT_SAFE_TAGS = (
    "strong", "b", "em", "i", "u", "code", "pre", "span", "div", "p", "br", "hr",
)

SAFE_TAGS = frozenset(
    name.strip().lower()
    for name in os.getenv('SAFE_TAGS', ','.join(DEFAULT_SAFE_TAGS)).split(',')
    if name.strip()
)

# Colon handling switches
PRESERVE_COLONS = _env_flag('PRESERVE_COLONS', 'true')
REPAIR_FULLWIDTH_COLONS = _env_flag('REPAIR_FULLWIDTH_COLONS', 'true')

# Raise instead of warn when tokens go missing during a translation round trip
STRICT_PLACEHOLDER_CHECK = _env_flag('STRICT_PLACEHOLDER_CHECK', 'false')

# Debug mode (reload after .env is loaded)
DEBUG_MODE = os.getenv('DEBUG_MODE', 'false').lower() == 'true'

if DEBUG_MODE or _debug_mode:
    _config_logger.setLevel(logging.DEBUG)
    _config_logger.debug("LOADED CONFIGURATION VALUES:")
    _config_logger.debug(f"   SAFE_TAGS: {sorted(SAFE_TAGS)}")
    _config_logger.debug(f"   PRESERVE_COLONS: {PRESERVE_COLONS}")
    _config_logger.debug(f"   REPAIR_FULLWIDTH_COLONS: {REPAIR_FULLWIDTH_COLONS}")
    _config_logger.debug(f"   STRICT_PLACEHOLDER_CHECK: {STRICT_PLACEHOLDER_CHECK}")

# ============================================================================
# TOKEN PLACEHOLDER CONFIGURATION
# ============================================================================
# Protected fragments are swapped for these tokens before the text goes to a
# translation service. The delimiter is made of letters translation engines
# leave alone, but they may change its casing.

PLACEHOLDER_DELIMITER = "ĦĐŁXĦ"
"""Rare multi-character sequence wrapping each ordinal"""

PLACEHOLDER_PREFIX = PLACEHOLDER_DELIMITER
"""Prefix for tokens (e.g., ĦĐŁXĦ in ĦĐŁXĦ000ĦĐŁXĦ)"""

PLACEHOLDER_SUFFIX = PLACEHOLDER_DELIMITER
"""Suffix for tokens"""

PLACEHOLDER_ORDINAL_WIDTH = 3
"""Minimum number of digits in the ordinal. Wider ordinals are used past 999."""

ASCII_COLON = ":"
FULLWIDTH_COLON = "："


@dataclass
class MarkupConfig:
    """Per-call switches for the preservation pipeline"""

    preserve_colons: bool = PRESERVE_COLONS
    repair_fullwidth_colons: bool = REPAIR_FULLWIDTH_COLONS
    strict_placeholder_check: bool = STRICT_PLACEHOLDER_CHECK
    safe_tags: FrozenSet[str] = field(default_factory=lambda: SAFE_TAGS)

    @classmethod
    def from_dict(cls, request_data: dict) -> 'MarkupConfig':
        """Create config from request data, falling back to env defaults"""
        # An explicit empty list means "strip every tag"
        if 'safe_tags' in request_data:
            safe_tags = frozenset(t.lower() for t in request_data['safe_tags'])
        else:
            safe_tags = SAFE_TAGS
        return cls(
            preserve_colons=request_data.get('preserve_colons', PRESERVE_COLONS),
            repair_fullwidth_colons=request_data.get('repair_fullwidth_colons', REPAIR_FULLWIDTH_COLONS),
            strict_placeholder_check=request_data.get('strict_placeholder_check', STRICT_PLACEHOLDER_CHECK),
            safe_tags=frozenset(t.lower() for t in safe_tags) if safe_tags else SAFE_TAGS,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'preserve_colons': self.preserve_colons,
            'repair_fullwidth_colons': self.repair_fullwidth_colons,
            'strict_placeholder_check': self.strict_placeholder_check,
            'safe_tags': sorted(self.safe_tags),
        }
