"""CLI entry points for shipment screening."""

from shipment_compliance.cli.main import screen

__all__ = ["screen"]
