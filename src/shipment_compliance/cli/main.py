"""CLI entry points for shipment screening."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from shipment_compliance.audit import ScreeningAuditLog
from shipment_compliance.core.config import get_audit_log_path, get_taxonomy_path
from shipment_compliance.core.exceptions import TaxonomyError
from shipment_compliance.matching.analyzer import ContentRiskAnalyzer
from shipment_compliance.policy import meets_level, recommended_action
from shipment_compliance.taxonomy.catalog import REFERENCE_TAXONOMY, load_taxonomy
from shipment_compliance.taxonomy.models import RiskLevel
from shipment_compliance.ui.display import (
    display_result,
    display_results,
    print_banner,
    print_error,
    print_success,
    print_warning,
)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FLAGGED = 2

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def _read_texts(args: argparse.Namespace) -> list[str]:
    if args.text:
        return [" ".join(args.text)]
    if args.file is not None:
        lines = args.file.read_text(encoding="utf-8").splitlines()
    else:
        lines = sys.stdin.read().splitlines()
    return [line for line in lines if line.strip()]


def screen() -> None:
    """Shipment screening CLI entry point.

    Screens descriptions given as arguments, read from a file (one per
    line) or from stdin, and exits with status 2 when any result
    reaches the --fail-on level.
    """
    parser = argparse.ArgumentParser(
        description="Shipment Screen - Check shipment descriptions for contraband"
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Description to screen (joined with spaces)",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help="File with one description per line",
    )
    parser.add_argument(
        "-t",
        "--taxonomy",
        type=Path,
        default=None,
        help="JSON taxonomy file (default: $SHIPMENT_COMPLIANCE_TAXONOMY or built-in)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per description",
    )
    parser.add_argument(
        "--audit-log",
        type=Path,
        default=None,
        help="Append results to a JSON Lines audit log",
    )
    parser.add_argument(
        "--fail-on",
        choices=["critical", "warning", "never"],
        default="critical",
        help="Exit with status 2 at or above this level (default: critical)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    args = parser.parse_args()
    setup_logging(args.verbose)

    taxonomy_path = args.taxonomy or get_taxonomy_path()
    try:
        taxonomy = load_taxonomy(taxonomy_path) if taxonomy_path else REFERENCE_TAXONOMY
    except TaxonomyError as e:
        print_error(str(e))
        sys.exit(EXIT_ERROR)

    try:
        texts = _read_texts(args)
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Cannot read input: {e}")
        sys.exit(EXIT_ERROR)

    analyzer = ContentRiskAnalyzer(taxonomy=taxonomy)
    results = analyzer.analyze_many(texts)
    logger.debug("Screened %d descriptions", len(results))

    audit_path = args.audit_log or get_audit_log_path()
    if audit_path is not None:
        audit_log = ScreeningAuditLog(audit_path)
        source = str(args.file) if args.file is not None else "cli"
        for text, result in zip(texts, results):
            audit_log.record(text, result, source=source)

    if args.json:
        for result in results:
            data = result.to_dict()
            data["action"] = recommended_action(result).value
            print(json.dumps(data, ensure_ascii=False))
    else:
        source_label = str(taxonomy_path) if taxonomy_path else "built-in taxonomy"
        print_banner("Shipment Screen", f"Taxonomy: {source_label}")
        if len(results) == 1:
            display_result(texts[0], results[0])
        else:
            display_results(texts, results)

        flagged = sum(1 for result in results if result.found)
        if flagged:
            print_warning(f"{flagged} of {len(results)} descriptions restricted")
        else:
            print_success(f"No restricted content in {len(results)} descriptions")

    if args.fail_on != "never":
        threshold = RiskLevel(args.fail_on)
        if any(meets_level(result, threshold) for result in results):
            sys.exit(EXIT_FLAGGED)

    sys.exit(EXIT_OK)


if __name__ == "__main__":
    screen()
