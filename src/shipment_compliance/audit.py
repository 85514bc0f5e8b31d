"""Screening audit log.

Records every screening decision to a JSON Lines file so that
blocked or flagged manifests can be reviewed later. The raw text is
never stored; entries carry its length and SHA-256 digest.
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from shipment_compliance.policy import recommended_action
from shipment_compliance.taxonomy.models import AnalysisResult

logger = logging.getLogger(__name__)


@dataclass
class ScreeningAuditEntry:
    """A single audit log entry."""

    timestamp: str
    text_sha256: str
    text_length: int
    found: bool
    level: str | None
    category: str
    category_key: str | None
    keyword: str | None
    match_type: str | None
    distance: int | None
    action: str
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)


class ScreeningAuditLog:
    """Append-only audit log of screening results."""

    def __init__(
        self,
        log_path: str | Path = "screening_audit.jsonl",
        enabled: bool = True,
    ) -> None:
        """Initialize audit log.

        Args:
            log_path: Path to the audit log file.
            enabled: Whether entries are written.
        """
        self.log_path = Path(log_path)
        self.enabled = enabled

        if self.enabled:
            try:
                self.log_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.warning("Audit log disabled, cannot create %s: %s", self.log_path.parent, e)
                self.enabled = False

    def record(
        self,
        text: str,
        result: AnalysisResult,
        source: str | None = None,
    ) -> ScreeningAuditEntry:
        """Record one screening.

        Args:
            text: The screened description.
            result: Result returned by the analyzer.
            source: Optional origin label (file name, "cli", ...).

        Returns:
            The audit entry that was logged.
        """
        entry = ScreeningAuditEntry(
            timestamp=datetime.now().isoformat(),
            text_sha256=hashlib.sha256(text.encode("utf-8")).hexdigest(),
            text_length=len(text),
            found=result.found,
            level=result.level.value if result.level is not None else None,
            category=result.category,
            category_key=result.category_key,
            keyword=result.keyword,
            match_type=result.match_type.value if result.match_type is not None else None,
            distance=result.distance,
            action=recommended_action(result).value,
            source=source,
        )

        if self.enabled:
            try:
                with open(self.log_path, "a", encoding="utf-8") as f:
                    f.write(entry.to_json() + "\n")
            except OSError as e:
                logger.warning("Failed to write audit log: %s", e)

        return entry

    def read_entries(self) -> list[dict[str, Any]]:
        """Read all entries back from the log file.

        Returns:
            Parsed entries, oldest first. Empty if the file does not exist.
        """
        if not self.log_path.exists():
            return []

        entries = []
        with open(self.log_path, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line:
                    entries.append(json.loads(line))
        return entries
