"""Custom exception hierarchy for compliance screening."""

from __future__ import annotations

from pathlib import Path


class ComplianceError(Exception):
    """Base exception for all compliance-screening errors."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class TaxonomyError(ComplianceError):
    """Invalid risk taxonomy definition."""

    pass


class EmptyTaxonomyError(TaxonomyError):
    """Taxonomy defines no categories."""

    def __init__(self, details: str | None = None) -> None:
        super().__init__("Taxonomy defines no risk categories", details)


class TaxonomyLoadError(TaxonomyError):
    """Taxonomy file is missing or unreadable."""

    def __init__(self, path: str | Path, details: str | None = None) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot load taxonomy from {self.path}", details)
