"""Tests for taxonomy models, reference data and loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from shipment_compliance.core.exceptions import (
    EmptyTaxonomyError,
    TaxonomyError,
    TaxonomyLoadError,
)
from shipment_compliance.matching.analyzer import ContentRiskAnalyzer
from shipment_compliance.taxonomy.catalog import (
    REFERENCE_TAXONOMY,
    RiskTaxonomy,
    load_taxonomy,
)
from shipment_compliance.taxonomy.models import RiskCategory, RiskLevel


class TestReferenceTaxonomy:
    """Tests for the built-in taxonomy data."""

    def test_declaration_order(self) -> None:
        """Categories iterate in precedence order."""
        assert list(REFERENCE_TAXONOMY) == [
            "weapons",
            "hazmat",
            "narcotics",
            "medication",
            "protected",
        ]

    @pytest.mark.parametrize(
        "key,level,label",
        [
            ("weapons", RiskLevel.CRITICAL, "WAFFEN"),
            ("hazmat", RiskLevel.CRITICAL, "GEFAHRGUT"),
            ("narcotics", RiskLevel.CRITICAL, "BETÄUBUNGSMITTEL"),
            ("medication", RiskLevel.WARNING, "MEDIKAMENTE"),
            ("protected", RiskLevel.CRITICAL, "ARTENSCHUTZ"),
        ],
    )
    def test_category_definitions(self, key: str, level: RiskLevel, label: str) -> None:
        """Each category carries its level and label."""
        category = REFERENCE_TAXONOMY[key]
        assert category.level == level
        assert category.category_label == label
        assert category.message

    def test_keywords_are_lowercase(self) -> None:
        """All reference keywords are stored lowercase."""
        for category in REFERENCE_TAXONOMY.values():
            for keyword in category.keywords:
                assert keyword == keyword.lower()

    def test_mapping_is_read_only(self) -> None:
        """The taxonomy cannot be modified in place."""
        with pytest.raises(TypeError):
            REFERENCE_TAXONOMY["extra"] = REFERENCE_TAXONOMY["weapons"]  # type: ignore[index]

    def test_category_is_frozen(self) -> None:
        """Category records are immutable."""
        with pytest.raises(ValidationError):
            REFERENCE_TAXONOMY["weapons"].level = RiskLevel.INFO  # type: ignore[misc]

    def test_keywords_count(self) -> None:
        """Keyword count sums all categories."""
        assert REFERENCE_TAXONOMY.keywords_count == 24 + 22 + 23 + 19 + 12


class TestRiskCategory:
    """Tests for RiskCategory validation."""

    def test_keywords_normalized(self) -> None:
        """Keywords are stripped and lowercased."""
        category = RiskCategory(
            level="critical",
            keywords=["  Pistole ", "GUN"],
            category_label="WAFFEN",
            message="Verboten.",
        )
        assert category.keywords == ("pistole", "gun")
        assert category.level == RiskLevel.CRITICAL

    def test_blank_keyword_rejected(self) -> None:
        """Blank keywords would match every word."""
        with pytest.raises(ValidationError):
            RiskCategory(
                level="warning",
                keywords=["ok", "  "],
                category_label="X",
                message="Y",
            )

    def test_empty_keywords_rejected(self) -> None:
        """A category needs at least one keyword."""
        with pytest.raises(ValidationError):
            RiskCategory(level="info", keywords=[], category_label="X", message="Y")

    def test_unknown_level_rejected(self) -> None:
        """Only critical, warning and info are valid levels."""
        with pytest.raises(ValidationError):
            RiskCategory(level="severe", keywords=["x"], category_label="X", message="Y")


class TestRiskTaxonomy:
    """Tests for building and extending taxonomies."""

    def test_empty_taxonomy_rejected(self) -> None:
        """A taxonomy without categories is an error."""
        with pytest.raises(EmptyTaxonomyError):
            RiskTaxonomy({})

    def test_with_category_appends(self) -> None:
        """New categories go last and the original is unchanged."""
        extra = RiskCategory(
            level=RiskLevel.INFO,
            keywords=("reisepass",),
            category_label="DOKUMENTE",
            message="Bitte separat melden.",
        )
        extended = REFERENCE_TAXONOMY.with_category("documents", extra)
        assert list(extended)[-1] == "documents"
        assert "documents" not in REFERENCE_TAXONOMY
        assert len(extended) == len(REFERENCE_TAXONOMY) + 1

        result = ContentRiskAnalyzer(taxonomy=extended).analyze("Reisepass")
        assert result.category == "DOKUMENTE"
        assert result.level == RiskLevel.INFO

    def test_with_category_replaces_in_place(self) -> None:
        """Replacing a category keeps its position."""
        replacement = REFERENCE_TAXONOMY["weapons"].model_copy(update={"message": "Neu."})
        replaced = REFERENCE_TAXONOMY.with_category("weapons", replacement)
        assert list(replaced) == list(REFERENCE_TAXONOMY)
        assert replaced["weapons"].message == "Neu."

    def test_from_dict_invalid_category(self) -> None:
        """Validation failures are reported as TaxonomyError."""
        with pytest.raises(TaxonomyError, match="Invalid category 'bad'"):
            RiskTaxonomy.from_dict({"bad": {"level": "critical", "keywords": ["x"]}})

    def test_from_dict_not_a_mapping(self) -> None:
        """Top-level data must be an object."""
        with pytest.raises(TaxonomyError):
            RiskTaxonomy.from_dict(["weapons"])  # type: ignore[arg-type]

    def test_to_dict_round_trip(self) -> None:
        """Exported data rebuilds an equal taxonomy."""
        rebuilt = RiskTaxonomy.from_dict(REFERENCE_TAXONOMY.to_dict())
        assert list(rebuilt) == list(REFERENCE_TAXONOMY)
        assert dict(rebuilt) == dict(REFERENCE_TAXONOMY)


class TestLoadTaxonomy:
    """Tests for loading taxonomies from JSON files."""

    def test_load_preserves_file_order(self, taxonomy_file: Path) -> None:
        """Categories follow the order in the file."""
        taxonomy = load_taxonomy(taxonomy_file)
        assert list(taxonomy) == ["documents", "weapons"]
        assert taxonomy["documents"].level == RiskLevel.INFO
        assert taxonomy["documents"].keywords == ("reisepass", "passport")

    def test_loaded_taxonomy_screens(self, taxonomy_file: Path) -> None:
        """A loaded taxonomy drives the analyzer."""
        analyzer = ContentRiskAnalyzer(taxonomy=load_taxonomy(taxonomy_file))
        assert analyzer.analyze("Mein Reisepass").category == "DOKUMENTE"
        assert analyzer.analyze("Pistole").category == "WAFFEN"
        assert analyzer.analyze("Kokain").found is False

    def test_missing_file(self, temp_dir: Path) -> None:
        """Missing files raise TaxonomyLoadError."""
        path = temp_dir / "missing.json"
        with pytest.raises(TaxonomyLoadError) as exc_info:
            load_taxonomy(path)
        assert exc_info.value.path == path

    def test_invalid_json(self, temp_dir: Path) -> None:
        """Malformed JSON raises TaxonomyLoadError."""
        path = temp_dir / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(TaxonomyLoadError, match="invalid JSON"):
            load_taxonomy(path)

    def test_duplicate_keys(self, temp_dir: Path) -> None:
        """Duplicate category keys are rejected instead of silently merged."""
        category = json.dumps(
            {"level": "info", "keywords": ["x"], "category_label": "X", "message": "Y"}
        )
        path = temp_dir / "dupes.json"
        path.write_text(f'{{"a": {category}, "a": {category}}}', encoding="utf-8")
        with pytest.raises(TaxonomyError, match="Duplicate key"):
            load_taxonomy(path)

    def test_empty_object(self, temp_dir: Path) -> None:
        """An empty taxonomy file is rejected."""
        path = temp_dir / "empty.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(EmptyTaxonomyError):
            load_taxonomy(path)

    def test_invalid_utf8(self, temp_dir: Path) -> None:
        """A file that is not UTF-8 raises TaxonomyLoadError."""
        path = temp_dir / "latin1.json"
        path.write_bytes(b'{"x\xff": 1}')
        with pytest.raises(TaxonomyLoadError) as exc_info:
            load_taxonomy(path)
        assert exc_info.value.path == path
