"""Configuration constants and screening settings."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

# =============================================================================
# Tokenization
# =============================================================================
TOKEN_SPLIT_PATTERN: re.Pattern[str] = re.compile(r"[\s,.\-]+")
MIN_WORD_LENGTH: int = 3  # Shorter tokens are never matched

# =============================================================================
# Fuzzy Matching Cutoffs
# =============================================================================
SHORT_KEYWORD_MAX_LENGTH: int = 3  # Substring match only up to this length
MEDIUM_KEYWORD_MAX_LENGTH: int = 5
MEDIUM_KEYWORD_MAX_DISTANCE: int = 1  # Keywords of 4-5 chars
LONG_KEYWORD_MAX_DISTANCE: int = 2  # Keywords longer than 5 chars

# =============================================================================
# Caller Policy
# =============================================================================
LIVE_CHECK_MIN_LENGTH: int = 3  # Shipment form screens once input exceeds 2 chars

# =============================================================================
# Environment
# =============================================================================
TAXONOMY_ENV_VAR: str = "SHIPMENT_COMPLIANCE_TAXONOMY"
AUDIT_LOG_ENV_VAR: str = "SHIPMENT_COMPLIANCE_AUDIT_LOG"


@dataclass(frozen=True)
class ScreeningConfig:
    """Tokenization and fuzzy-matching settings for the risk analyzer."""

    min_word_length: int = MIN_WORD_LENGTH
    short_keyword_max_length: int = SHORT_KEYWORD_MAX_LENGTH
    medium_keyword_max_length: int = MEDIUM_KEYWORD_MAX_LENGTH
    medium_keyword_max_distance: int = MEDIUM_KEYWORD_MAX_DISTANCE
    long_keyword_max_distance: int = LONG_KEYWORD_MAX_DISTANCE
    token_pattern: re.Pattern[str] = field(default=TOKEN_SPLIT_PATTERN, repr=False)


DEFAULT_CONFIG = ScreeningConfig()


def get_taxonomy_path() -> Path | None:
    """Get the taxonomy override file from the environment.

    Returns:
        Path named by SHIPMENT_COMPLIANCE_TAXONOMY, or None if unset.
    """
    value = os.environ.get(TAXONOMY_ENV_VAR, "").strip()
    if not value:
        return None
    return Path(value).expanduser()


def get_audit_log_path() -> Path | None:
    """Get the default audit log file from the environment."""
    value = os.environ.get(AUDIT_LOG_ENV_VAR, "").strip()
    if not value:
        return None
    return Path(value).expanduser()
