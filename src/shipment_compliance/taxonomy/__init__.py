"""Risk taxonomy - category models and reference data."""

from shipment_compliance.taxonomy.catalog import (
    REFERENCE_TAXONOMY,
    RiskTaxonomy,
    load_taxonomy,
)
from shipment_compliance.taxonomy.models import (
    AnalysisResult,
    MatchType,
    RiskCategory,
    RiskLevel,
)

__all__ = [
    "RiskLevel",
    "MatchType",
    "RiskCategory",
    "AnalysisResult",
    "RiskTaxonomy",
    "REFERENCE_TAXONOMY",
    "load_taxonomy",
]
