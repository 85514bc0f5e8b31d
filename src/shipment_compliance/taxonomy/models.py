"""Pydantic data models for content-risk screening.

Defines the risk level enum, the immutable category record that
makes up a taxonomy, and the result of a single screening call.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ============================================================================
# Enums
# ============================================================================


class RiskLevel(str, Enum):
    """Severity reported for a matched category.

    The caller decides the consequence: critical content is usually
    blocked outright, warning content surfaces an advisory notice.
    """

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class MatchType(str, Enum):
    """How a token triggered a keyword."""

    EXACT = "exact"  # Keyword contained in token
    FUZZY = "fuzzy"  # Within edit-distance tolerance


# ============================================================================
# Taxonomy Models
# ============================================================================


class RiskCategory(BaseModel):
    """A single contraband category of the risk taxonomy."""

    model_config = ConfigDict(frozen=True)

    level: RiskLevel = Field(..., description="Severity reported on match")
    keywords: tuple[str, ...] = Field(..., min_length=1, description="Lowercase triggers")
    category_label: str = Field(..., min_length=1, description="Short label, e.g. WAFFEN")
    message: str = Field(..., min_length=1, description="Why the content is flagged")

    @field_validator("keywords")
    @classmethod
    def _normalize_keywords(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized = tuple(keyword.strip().lower() for keyword in value)
        if any(not keyword for keyword in normalized):
            raise ValueError("keywords must not be blank")
        return normalized


# ============================================================================
# Result Models
# ============================================================================


class AnalysisResult(BaseModel):
    """Outcome of screening one piece of text.

    The first four fields form the public contract consumed by the
    shipment form. The remaining fields record which keyword fired,
    for audit trails and debugging.
    """

    model_config = ConfigDict(frozen=True)

    found: bool = Field(default=False, description="Whether any category matched")
    level: RiskLevel | None = Field(default=None, description="Severity of the match")
    category: str = Field(default="", description="Category label")
    message: str = Field(default="", description="Category message")

    # Match details
    category_key: str | None = Field(default=None, description="Taxonomy key")
    keyword: str | None = Field(default=None, description="Keyword that fired")
    matched_word: str | None = Field(default=None, description="Input token that matched")
    match_type: MatchType | None = Field(default=None, description="Exact or fuzzy")
    distance: int | None = Field(default=None, ge=0, description="Edit distance of the match")

    @classmethod
    def none(cls) -> AnalysisResult:
        """Build the result for content with no detected risk."""
        return cls()

    @classmethod
    def from_match(
        cls,
        category_key: str,
        category: RiskCategory,
        keyword: str,
        matched_word: str,
        match_type: MatchType,
        distance: int,
    ) -> AnalysisResult:
        """Build a positive result from a matched category."""
        return cls(
            found=True,
            level=category.level,
            category=category.category_label,
            message=category.message,
            category_key=category_key,
            keyword=keyword,
            matched_word=matched_word,
            match_type=match_type,
            distance=distance,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the four-field dictionary returned to callers."""
        return {
            "found": self.found,
            "level": self.level.value if self.level is not None else None,
            "category": self.category,
            "message": self.message,
        }
