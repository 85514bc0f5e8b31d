"""Rich terminal UI components for shipment screening."""

from shipment_compliance.ui.display import (
    display_result,
    display_results,
    print_banner,
    print_error,
    print_success,
    print_warning,
)

__all__ = [
    "display_result",
    "display_results",
    "print_banner",
    "print_error",
    "print_success",
    "print_warning",
]
