"""Rich formatting and display for ranking results."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import AnalysisResult, UsageRecord


def format_ranking_table(records: tuple[UsageRecord, ...]) -> Table:
    """Create Rich table with one row per usage record."""
    table = Table(title="Global Variable Usage Ranking")

    table.add_column("variable", style="cyan", no_wrap=True)
    table.add_column("count", justify="right", style="magenta")

    for record in records:
        # Unused globals stand out
        count_text = Text(str(record.count))
        if record.count == 0:
            count_text.style = "bold red"

        table.add_row(record.variable, count_text)

    return table


def print_summary_stats(console: Console, result: AnalysisResult) -> None:
    """Print summary statistics about the analysis."""
    unused = sum(1 for record in result.records if record.count == 0)

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"Files scanned: {len(result.files)}")
    console.print(f"Global variables declared: {len(result.declarations)}")
    console.print(f"Never used: {unused}")

    if unused > 0:
        console.print(f"[yellow]⚠️  {unused} global variable(s) are never used.[/yellow]")


def display_ranking(console: Console, result: AnalysisResult) -> None:
    """Display complete analysis results with table and summary."""
    console.print(format_ranking_table(result.records))

    if not result.records:
        console.print("[yellow]No global variables found.[/yellow]")
        return

    print_summary_stats(console, result)
