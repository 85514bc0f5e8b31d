"""Rich terminal display functions for shipment screening."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shipment_compliance.policy import ScreeningAction, manifest_status, recommended_action
from shipment_compliance.taxonomy.models import AnalysisResult, RiskLevel

# Global console instance
_console: Console | None = None

LEVEL_STYLES: dict[RiskLevel, str] = {
    RiskLevel.CRITICAL: "bold red",
    RiskLevel.WARNING: "bold yellow",
    RiskLevel.INFO: "cyan",
}


def get_console() -> Console:
    """Get the global rich console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def print_banner(title: str, subtitle: str | None = None) -> None:
    """Print a styled banner.

    Args:
        title: Main title text.
        subtitle: Optional subtitle.
    """
    console = get_console()
    text = Text(title, style="bold cyan")
    if subtitle:
        text.append(f"\n{subtitle}", style="dim")
    console.print(Panel(text, border_style="cyan"))


def print_success(message: str) -> None:
    """Print a success message."""
    get_console().print(f"[bold green]✓[/] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    get_console().print(f"[bold yellow]⚠[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    get_console().print(f"[bold red]✗[/] {message}")


def _truncate(text: str, width: int) -> str:
    text = " ".join(text.split())
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def display_result(text: str, result: AnalysisResult) -> None:
    """Display a single screening result as an alert panel.

    Args:
        text: The screened description.
        result: Its screening result.
    """
    console = get_console()

    if not result.found or result.level is None:
        console.print(
            Panel(
                Text(_truncate(text, 80), style="dim"),
                title="[bold green]OK[/]",
                border_style="green",
            )
        )
        return

    style = LEVEL_STYLES[result.level]
    body = Text()
    body.append(f"{result.category}\n", style=style)
    body.append(f"{result.message}\n", style="bold")
    body.append("Trigger: ", style="dim")
    body.append(f"{result.matched_word} ~ {result.keyword}", style="cyan")
    if result.match_type is not None:
        body.append(f" ({result.match_type.value}, distance {result.distance})", style="dim")

    border = "red" if recommended_action(result) == ScreeningAction.BLOCK else "yellow"
    console.print(
        Panel(body, title=f"[{style}]{manifest_status(result)}[/]", border_style=border)
    )


def display_results(
    texts: Sequence[str],
    results: Sequence[AnalysisResult],
    max_text_width: int = 50,
) -> None:
    """Display screening results for several descriptions in a table.

    Args:
        texts: Screened descriptions.
        results: Results in the same order.
        max_text_width: Truncation width for the description column.
    """
    console = get_console()

    flagged = sum(1 for result in results if result.found)
    summary = Text()
    summary.append("Screened: ", style="dim")
    summary.append(f"{len(results)}\n", style="cyan")
    summary.append("Flagged: ", style="dim")
    summary.append(f"{flagged}", style="bold red" if flagged else "bold green")
    console.print(Panel(summary, title="[bold]Screening Results[/]", border_style="green"))

    table = Table(
        title="Shipment Descriptions",
        show_header=True,
        header_style="bold magenta",
    )

    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Description", justify="left")
    table.add_column("Status", justify="left")
    table.add_column("Level", justify="left")
    table.add_column("Category", justify="left", style="cyan")
    table.add_column("Trigger", justify="left", style="dim")

    for i, (text, result) in enumerate(zip(texts, results), 1):
        if result.found and result.level is not None:
            style = LEVEL_STYLES[result.level]
            level = f"[{style}]{result.level.value}[/]"
            trigger = f"{result.matched_word} ~ {result.keyword}"
        else:
            level = "-"
            trigger = ""

        table.add_row(
            str(i),
            Text(_truncate(text, max_text_width)),
            manifest_status(result),
            level,
            result.category,
            Text(trigger),
        )

    console.print(table)
