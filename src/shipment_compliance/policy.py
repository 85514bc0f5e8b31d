"""Caller-side decisions derived from screening results.

The analyzer only reports a level. These helpers encode how the
shipment form reacts: critical content blocks the manifest, warning
content shows an advisory, and the waybill status reads RESTRICTED
for any match.
"""

from __future__ import annotations

from enum import Enum

from shipment_compliance.core.config import LIVE_CHECK_MIN_LENGTH
from shipment_compliance.taxonomy.models import AnalysisResult, RiskLevel


class ScreeningAction(str, Enum):
    """Recommended reaction to a screening result."""

    BLOCK = "block"
    WARN = "warn"
    ALLOW = "allow"


_LEVEL_ACTIONS: dict[RiskLevel, ScreeningAction] = {
    RiskLevel.CRITICAL: ScreeningAction.BLOCK,
    RiskLevel.WARNING: ScreeningAction.WARN,
    RiskLevel.INFO: ScreeningAction.ALLOW,
}

# Ordering used for --fail-on style thresholds
_LEVEL_RANK: dict[RiskLevel, int] = {
    RiskLevel.INFO: 0,
    RiskLevel.WARNING: 1,
    RiskLevel.CRITICAL: 2,
}


def recommended_action(result: AnalysisResult) -> ScreeningAction:
    """Map a result to the action the shipment form takes."""
    if not result.found or result.level is None:
        return ScreeningAction.ALLOW
    return _LEVEL_ACTIONS[result.level]


def manifest_status(result: AnalysisResult) -> str:
    """Status printed on the waybill: RESTRICTED or OK."""
    return "RESTRICTED" if result.found else "OK"


def should_screen(text: str) -> bool:
    """Whether the live check runs for the current form input."""
    return len(text) >= LIVE_CHECK_MIN_LENGTH


def meets_level(result: AnalysisResult, threshold: RiskLevel) -> bool:
    """Check whether a result is at or above a severity threshold.

    Args:
        result: Screening result.
        threshold: Minimum level that counts.

    Returns:
        True if the result matched with a level at least as severe.
    """
    if not result.found or result.level is None:
        return False
    return _LEVEL_RANK[result.level] >= _LEVEL_RANK[threshold]
