"""Core screening functionality - configuration, exceptions."""

from shipment_compliance.core.config import (
    DEFAULT_CONFIG,
    LIVE_CHECK_MIN_LENGTH,
    MIN_WORD_LENGTH,
    ScreeningConfig,
    get_audit_log_path,
    get_taxonomy_path,
)
from shipment_compliance.core.exceptions import (
    ComplianceError,
    EmptyTaxonomyError,
    TaxonomyError,
    TaxonomyLoadError,
)

__all__ = [
    "ScreeningConfig",
    "DEFAULT_CONFIG",
    "MIN_WORD_LENGTH",
    "LIVE_CHECK_MIN_LENGTH",
    "get_taxonomy_path",
    "get_audit_log_path",
    "ComplianceError",
    "TaxonomyError",
    "EmptyTaxonomyError",
    "TaxonomyLoadError",
]
