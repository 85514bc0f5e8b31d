"""Content-risk analysis for shipment descriptions.

Scans free text for contraband references using substring
containment plus length-scaled fuzzy matching, which catches
compound words, typos and light obfuscation without a dictionary.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from shipment_compliance.core.config import DEFAULT_CONFIG, ScreeningConfig
from shipment_compliance.matching.distance import levenshtein_distance
from shipment_compliance.taxonomy.catalog import REFERENCE_TAXONOMY, RiskTaxonomy
from shipment_compliance.taxonomy.models import AnalysisResult, MatchType

logger = logging.getLogger(__name__)


def tokenize(text: str, config: ScreeningConfig = DEFAULT_CONFIG) -> list[str]:
    """Split text into lowercase candidate words.

    Splits on runs of whitespace, commas, periods and hyphens and
    drops words shorter than the configured minimum length.

    Args:
        text: Free-text description.
        config: Screening settings.

    Returns:
        Candidate words in input order.

    Example:
        >>> tokenize("Zwei Pistolen, ok.")
        ['zwei', 'pistolen']
    """
    return [
        word
        for word in config.token_pattern.split(text.lower())
        if len(word) >= config.min_word_length
    ]


def fuzzy_threshold(keyword: str, config: ScreeningConfig = DEFAULT_CONFIG) -> int | None:
    """Get the maximum edit distance tolerated for a keyword.

    Args:
        keyword: Lowercase taxonomy keyword.
        config: Screening settings.

    Returns:
        Allowed distance, or None if the keyword only matches as a substring.
    """
    length = len(keyword)
    if length <= config.short_keyword_max_length:
        return None
    if length <= config.medium_keyword_max_length:
        return config.medium_keyword_max_distance
    return config.long_keyword_max_distance


class ContentRiskAnalyzer:
    """Rule-based scanner that maps text onto a risk taxonomy.

    Categories are checked in taxonomy order and the first match
    wins. Within a category, every word is tried against every
    keyword; a substring hit or a fuzzy hit returns immediately.

    Example:
        >>> analyzer = ContentRiskAnalyzer()
        >>> analyzer.analyze("Ich habe eine Pistole dabei").category
        'WAFFEN'
    """

    def __init__(
        self,
        taxonomy: RiskTaxonomy = REFERENCE_TAXONOMY,
        config: ScreeningConfig = DEFAULT_CONFIG,
    ) -> None:
        self.taxonomy = taxonomy
        self.config = config

    def analyze(self, text: str) -> AnalysisResult:
        """Screen a single description.

        Args:
            text: Free-text shipment description, any length.

        Returns:
            AnalysisResult for the first matching category, or a
            not-found result.
        """
        if not text:
            return AnalysisResult.none()

        words = tokenize(text, self.config)

        for key, category in self.taxonomy.items():
            for word in words:
                for keyword in category.keywords:
                    if keyword in word:
                        return self._matched(key, keyword, word, MatchType.EXACT, 0)

                    threshold = fuzzy_threshold(keyword, self.config)
                    if threshold is None:
                        continue

                    # Lengths differing by more than the threshold cannot match
                    if abs(len(word) - len(keyword)) > threshold:
                        continue

                    distance = levenshtein_distance(word, keyword)
                    if distance <= threshold:
                        return self._matched(key, keyword, word, MatchType.FUZZY, distance)

        return AnalysisResult.none()

    def analyze_many(self, texts: Iterable[str]) -> list[AnalysisResult]:
        """Screen several descriptions.

        Args:
            texts: Descriptions to screen.

        Returns:
            One result per description, in input order.
        """
        return [self.analyze(text) for text in texts]

    def _matched(
        self,
        key: str,
        keyword: str,
        word: str,
        match_type: MatchType,
        distance: int,
    ) -> AnalysisResult:
        logger.debug(
            "Matched category %s: keyword=%r word=%r type=%s distance=%d",
            key,
            keyword,
            word,
            match_type.value,
            distance,
        )
        return AnalysisResult.from_match(
            category_key=key,
            category=self.taxonomy[key],
            keyword=keyword,
            matched_word=word,
            match_type=match_type,
            distance=distance,
        )


_default_analyzer = ContentRiskAnalyzer()


def analyze_content_risk(text: str) -> AnalysisResult:
    """Screen text against the reference taxonomy.

    Args:
        text: Free-text shipment description.

    Returns:
        AnalysisResult; ``found`` is False when nothing matched.

    Example:
        >>> analyze_content_risk("Dokumente und Geschenke").found
        False
    """
    return _default_analyzer.analyze(text)
