"""Keyword matching - edit distance and the content-risk analyzer."""

from shipment_compliance.matching.analyzer import (
    ContentRiskAnalyzer,
    analyze_content_risk,
    fuzzy_threshold,
    tokenize,
)
from shipment_compliance.matching.distance import levenshtein_distance

__all__ = [
    "levenshtein_distance",
    "tokenize",
    "fuzzy_threshold",
    "ContentRiskAnalyzer",
    "analyze_content_risk",
]
