"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from shipment_compliance.core.config import AUDIT_LOG_ENV_VAR, TAXONOMY_ENV_VAR
from shipment_compliance.taxonomy.catalog import RiskTaxonomy
from shipment_compliance.taxonomy.models import RiskCategory, RiskLevel


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep taxonomy and audit overrides from leaking into tests."""
    monkeypatch.delenv(TAXONOMY_ENV_VAR, raising=False)
    monkeypatch.delenv(AUDIT_LOG_ENV_VAR, raising=False)


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for tests."""
    return tmp_path


@pytest.fixture
def small_taxonomy() -> RiskTaxonomy:
    """Two-category taxonomy with keywords of each fuzzy length class."""
    return RiskTaxonomy(
        {
            "first": RiskCategory(
                level=RiskLevel.CRITICAL,
                keywords=("abc", "abcde", "abcdef"),
                category_label="FIRST",
                message="First category.",
            ),
            "second": RiskCategory(
                level=RiskLevel.WARNING,
                keywords=("zebra", "overlap"),
                category_label="SECOND",
                message="Second category.",
            ),
        }
    )


@pytest.fixture
def taxonomy_file(temp_dir: Path) -> Path:
    """Write a valid taxonomy JSON file and return its path."""
    path = temp_dir / "taxonomy.json"
    data = {
        "documents": {
            "level": "info",
            "keywords": ["reisepass", "passport"],
            "category_label": "DOKUMENTE",
            "message": "Ausweisdokumente bitte separat melden.",
        },
        "weapons": {
            "level": "critical",
            "keywords": ["pistole"],
            "category_label": "WAFFEN",
            "message": "Streng verboten. Führt zur Sperrung.",
        },
    }
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Render rich output at a fixed width so table cells never wrap."""
    from rich.console import Console

    from shipment_compliance.ui import display

    monkeypatch.setattr(display, "_console", Console(width=200))
