"""Risk taxonomy data and loading.

The reference taxonomy is declared as a single data table. Category
order matters: when a description could match several categories,
the first declared category wins.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from shipment_compliance.core.exceptions import (
    EmptyTaxonomyError,
    TaxonomyError,
    TaxonomyLoadError,
)
from shipment_compliance.taxonomy.models import RiskCategory, RiskLevel

logger = logging.getLogger(__name__)

# Reference taxonomy - declaration order is the tie-break order
# Format: (key, level, keywords, label, message)
REFERENCE_CATEGORIES: list[tuple[str, RiskLevel, list[str], str, str]] = [
    (
        "weapons",
        RiskLevel.CRITICAL,
        [
            "waffe",
            "gun",
            "pistole",
            "pistol",
            "knife",
            "messer",
            "bomb",
            "bombe",
            "munition",
            "ammo",
            "bullet",
            "patrone",
            "schlagring",
            "taser",
            "spreng",
            "explosiv",
            "sihlah",
            "سلاح",
            "gewehr",
            "revolver",
            "dynamit",
            "granate",
            "c4",
            "semtex",
        ],
        "WAFFEN",
        "Streng verboten. Führt zur Sperrung.",
    ),
    (
        "hazmat",
        RiskLevel.CRITICAL,
        [
            "uran",
            "plutonium",
            "radioactiv",
            "radioaktiv",
            "isotope",
            "nuclear",
            "atom",
            "säure",
            "acid",
            "mercury",
            "quecksilber",
            "batterie",
            "battery",
            "lithium",
            "gas",
            "flammable",
            "brennbar",
            "poison",
            "gift",
            "toxin",
            "benzin",
            "petrol",
        ],
        "GEFAHRGUT",
        "Gefahrgut ist im Flugverkehr illegal.",
    ),
    (
        "narcotics",
        RiskLevel.CRITICAL,
        [
            "drogen",
            "drug",
            "cannabis",
            "weed",
            "kokain",
            "cocaine",
            "heroin",
            "hashish",
            "thc",
            "cbd",
            "pillen",
            "crystal",
            "meth",
            "mخدر",
            "marijuana",
            "koks",
            "speed",
            "amphetamin",
            "lsd",
            "ecstasy",
            "mdma",
            "opium",
            "fentanyl",
        ],
        "BETÄUBUNGSMITTEL",
        "Illegaler Drogenbesitz ist strafbar.",
    ),
    (
        "medication",
        RiskLevel.WARNING,
        [
            "ritalin",
            "xanax",
            "tilidin",
            "morphin",
            "tramadol",
            "oxy",
            "benzos",
            "valium",
            "spritze",
            "insulin",
            "blood",
            "blut",
            "darou",
            "دارو",
            "viagra",
            "testosteron",
            "steroid",
            "anabol",
            "antibiotika",
        ],
        "MEDIKAMENTE",
        "Ärztliches Attest zwingend erforderlich.",
    ),
    (
        "protected",
        RiskLevel.CRITICAL,
        [
            "elfenbein",
            "ivory",
            "fell",
            "fur",
            "skin",
            "koralle",
            "reptil",
            "snake",
            "tiger",
            "nashorn",
            "caviar",
            "papagei",
        ],
        "ARTENSCHUTZ",
        "Handel mit geschützten Arten verboten.",
    ),
]


class RiskTaxonomy(Mapping[str, RiskCategory]):
    """Ordered, read-only mapping of category key to RiskCategory.

    Iteration follows declaration order. Instances are never mutated;
    use with_category() to derive an extended taxonomy.
    """

    def __init__(self, categories: Mapping[str, RiskCategory]) -> None:
        if not categories:
            raise EmptyTaxonomyError()
        self._categories: Mapping[str, RiskCategory] = MappingProxyType(dict(categories))

    def __getitem__(self, key: str) -> RiskCategory:
        return self._categories[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __repr__(self) -> str:
        return f"RiskTaxonomy({list(self._categories)!r})"

    @property
    def keywords_count(self) -> int:
        """Total number of keywords across all categories."""
        return sum(len(category.keywords) for category in self._categories.values())

    def with_category(self, key: str, category: RiskCategory) -> RiskTaxonomy:
        """Return a new taxonomy with a category added or replaced.

        A new key is appended after all existing categories, so it has
        the lowest precedence. Replacing a key keeps its position.

        Args:
            key: Category key, e.g. "weapons".
            category: Category definition.

        Returns:
            New RiskTaxonomy.
        """
        categories = dict(self._categories)
        categories[key] = category
        return RiskTaxonomy(categories)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> RiskTaxonomy:
        """Build a taxonomy from plain data.

        Args:
            raw: Mapping of key to {level, keywords, category_label, message}.

        Returns:
            Validated RiskTaxonomy.

        Raises:
            TaxonomyError: If any category fails validation.
        """
        if not isinstance(raw, Mapping):
            raise TaxonomyError("Taxonomy must be a mapping", type(raw).__name__)

        categories: dict[str, RiskCategory] = {}
        for key, value in raw.items():
            if not str(key).strip():
                raise TaxonomyError("Category key must not be blank")
            try:
                categories[key] = RiskCategory.model_validate(value)
            except ValidationError as e:
                raise TaxonomyError(f"Invalid category '{key}'", str(e)) from e
        return cls(categories)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Convert to plain data in the taxonomy file format."""
        return {
            key: {
                "level": category.level.value,
                "keywords": list(category.keywords),
                "category_label": category.category_label,
                "message": category.message,
            }
            for key, category in self._categories.items()
        }


def _build_reference_taxonomy() -> RiskTaxonomy:
    return RiskTaxonomy(
        {
            key: RiskCategory(
                level=level,
                keywords=tuple(keywords),
                category_label=label,
                message=message,
            )
            for key, level, keywords, label, message in REFERENCE_CATEGORIES
        }
    )


REFERENCE_TAXONOMY: RiskTaxonomy = _build_reference_taxonomy()


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise TaxonomyError("Duplicate key in taxonomy file", key)
        result[key] = value
    return result


def load_taxonomy(path: str | Path) -> RiskTaxonomy:
    """Load a risk taxonomy from a JSON file.

    The file holds one object whose keys are category keys, in
    precedence order.

    Args:
        path: Path to the JSON taxonomy file.

    Returns:
        Validated RiskTaxonomy.

    Raises:
        TaxonomyLoadError: If the file is missing or not valid JSON.
        TaxonomyError: If the content is not a valid taxonomy.

    Example:
        >>> taxonomy = load_taxonomy("taxonomy.json")
        >>> list(taxonomy)
        ['weapons', 'hazmat']
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TaxonomyLoadError(path, str(e)) from e

    try:
        raw = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as e:
        raise TaxonomyLoadError(path, f"invalid JSON: {e}") from e

    taxonomy = RiskTaxonomy.from_dict(raw)
    logger.info(
        "Loaded taxonomy from %s: %d categories, %d keywords",
        path,
        len(taxonomy),
        taxonomy.keywords_count,
    )
    return taxonomy
