"""Shipment Compliance - Rule-based contraband screening for shipment descriptions."""

from shipment_compliance.core.exceptions import (
    ComplianceError,
    TaxonomyError,
    TaxonomyLoadError,
)
from shipment_compliance.matching.analyzer import ContentRiskAnalyzer, analyze_content_risk
from shipment_compliance.matching.distance import levenshtein_distance
from shipment_compliance.taxonomy.catalog import REFERENCE_TAXONOMY, RiskTaxonomy, load_taxonomy
from shipment_compliance.taxonomy.models import AnalysisResult, RiskCategory, RiskLevel

__version__ = "0.1.0"

__all__ = [
    # Analysis
    "analyze_content_risk",
    "ContentRiskAnalyzer",
    "levenshtein_distance",
    # Taxonomy
    "RiskLevel",
    "RiskCategory",
    "AnalysisResult",
    "RiskTaxonomy",
    "REFERENCE_TAXONOMY",
    "load_taxonomy",
    # Exceptions
    "ComplianceError",
    "TaxonomyError",
    "TaxonomyLoadError",
]
