"""Rich output formatting helpers for the Bubblewrap CLI.

Score Color Mapping (aligned with Lighthouse's report gauges):
    >= 0.9 = bold green, >= 0.5 = yellow, below = bold red, missing = dim
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bubblewrap.core import Config
from bubblewrap.validator import PwaValidationResult, ValidationStatus

_STATUS_STYLES: dict[ValidationStatus, str] = {
    ValidationStatus.PASS: "bold green",
    ValidationStatus.FAIL: "bold red",
}

console = Console()


def score_style(score: float | None) -> str:
    """Return the Rich style string for a Lighthouse score."""
    if score is None:
        return "dim"
    if score >= 0.9:
        return "bold green"
    if score >= 0.5:
        return "yellow"
    return "bold red"


def print_config(config: Config, path: Path) -> None:
    """Print the active configuration.

    Args:
        config: The loaded or newly created config.
        path: Where it is stored.
    """
    table = Table(title="Bubblewrap Config", show_header=True, header_style="bold")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("JDK", Text(config.jdk_path))
    table.add_row("Android SDK", Text(config.android_sdk_path))
    console.print(table)
    console.print(Text(f"Stored in {path}", style="dim"))


def print_validation_result(url: str, result: PwaValidationResult) -> None:
    """Print the verdict and category scores of a PWA validation.

    Args:
        url: The validated URL.
        result: Validation outcome.
    """
    verdict = Text(result.status.value, style=_STATUS_STYLES[result.status])
    header = Text.assemble(("URL: ", "bold"), (url, ""), ("  Status: ", "bold"), verdict)
    console.print(Panel(header, title="PWA Validation"))

    table = Table(title="Lighthouse Scores", show_header=True)
    table.add_column("Category", style="bold")
    table.add_column("Score", justify="right")
    for name, score in result.scores.items():
        shown = "-" if score is None else f"{score * 100:.0f}"
        table.add_row(name, Text(shown, style=score_style(score)))
    console.print(table)

    if result.psi_result is not None:
        lighthouse = result.psi_result.lighthouse_result
        console.print(Text(
            f"Lighthouse {lighthouse.lighthouse_version}, "
            f"final URL {lighthouse.final_url}, "
            f"{lighthouse.timing.total / 1000:.1f}s",
            style="dim",
        ))

