"""CLI interface for the tool comparison engine."""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from tool_compare.categorization.categories import (
    all_valid_comparisons,
    build_comparison_title,
    resolve_category,
)
from tool_compare.categorization.human_maintained import COMPARISON_CATEGORIES
from tool_compare.comparison import compare_tools
from tool_compare.consts import DEFAULT_CATALOG_PATH, METRIC_LABELS
from tool_compare.display.score_display import format_score, get_score_comparison, get_score_label
from tool_compare.evaluators.composite import calculate_weighted_score
from tool_compare.evaluators.registry import calculate_all_scores
from tool_compare.models.model_tool import ToolRecord
from tool_compare.storage.file_manager import CatalogError, FileManager, find_tool_by_id

app = typer.Typer(
    name="tcmp",
    help="Tool comparison engine - check comparability, score and compare AI tools",
)

console = Console()

CATALOG_OPTION = typer.Option(
    DEFAULT_CATALOG_PATH, "--catalog", help="Path to the tool catalog JSON file"
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _get_score_color(score: float) -> str:
    """Get color for score display."""
    if score >= 7:
        return "green"
    elif score >= 4:
        return "yellow"
    else:
        return "red"


def load_catalog(catalog: Path) -> list[ToolRecord]:
    """Load the catalog, exiting with an error message on failure."""
    try:
        tools = FileManager().load_tools(catalog)
    except CatalogError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if tools is None:
        console.print(f"[red]Error:[/red] Catalog not found: {catalog}")
        raise typer.Exit(1)
    return tools


def _find(tools: list[ToolRecord], tool_id: str) -> ToolRecord:
    tool = find_tool_by_id(tools, tool_id)
    if tool is not None:
        return tool
    console.print(f"[red]Error:[/red] Tool '{tool_id}' not found in catalog")
    raise typer.Exit(1)


@app.command()
def categories() -> None:
    """List comparison categories and what they can be compared with."""
    table = Table(title="Comparison Categories")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Comparable With", style="magenta")

    for cat in COMPARISON_CATEGORIES:
        table.add_row(cat.id, cat.name, ", ".join(cat.comparable_with))

    console.print(table)


@app.command()
def score(
    tool_id: str = typer.Argument(..., help="Tool ID"),
    catalog: Path = CATALOG_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Show per-metric scores for a tool."""
    _configure_logging(verbose)
    tool = _find(load_catalog(catalog), tool_id)

    scores = calculate_all_scores(tool).as_dict()
    resolved = resolve_category(tool.category)

    console.print(f"\n[bold]{tool.name}[/bold] ({tool.id})")
    console.print(f"Category: {resolved.name if resolved else 'unknown'}")

    table = Table(title="Scores")
    table.add_column("Metric", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Tier")

    for metric, value in scores.items():
        color = _get_score_color(value)
        table.add_row(
            METRIC_LABELS[metric], f"[{color}]{format_score(value)}[/{color}]", get_score_label(value)
        )

    console.print(table)
    console.print(f"Weighted score: {calculate_weighted_score(tool):.1f}/10")


@app.command()
def compare(
    tool_a: str = typer.Argument(..., help="First tool ID"),
    tool_b: str = typer.Argument(..., help="Second tool ID"),
    catalog: Path = CATALOG_OPTION,
    output_json: bool = typer.Option(False, "--json", help="Print the full report as JSON"),
    force: bool = typer.Option(False, "--force", help="Compare even if categories don't match"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Compare two tools head to head."""
    _configure_logging(verbose)
    tools = load_catalog(catalog)
    first = _find(tools, tool_a)
    second = _find(tools, tool_b)

    report = compare_tools(first, second)

    if not report.comparable and not force:
        console.print(
            f"[red]Error:[/red] {first.name} and {second.name} are not comparable "
            "(use --force to compare anyway)"
        )
        raise typer.Exit(1)

    if output_json:
        typer.echo(json.dumps(report.model_dump(mode="json"), indent=2))
        return

    console.print(f"\n[bold]{report.title}[/bold]")
    console.print(report.description)

    table = Table(title="Metric Scores")
    table.add_column("Metric", style="cyan")
    table.add_column(first.name, justify="right")
    table.add_column(second.name, justify="right")
    table.add_column("Difference")

    scores_a = report.scores_a.as_dict()
    scores_b = report.scores_b.as_dict()
    for metric, label in METRIC_LABELS.items():
        table.add_row(
            label,
            format_score(scores_a[metric]),
            format_score(scores_b[metric]),
            get_score_comparison(scores_a[metric], scores_b[metric], label.lower()),
        )
    table.add_row(
        "Weighted", f"{report.weighted_a:.1f}", f"{report.weighted_b:.1f}", "", style="bold"
    )
    console.print(table)

    verdict = report.verdict
    console.print(f"\n[bold green]Verdict:[/bold green] {verdict.headline}")
    for reason in verdict.reasons:
        console.print(f"  - {reason.text}")
    for rec in verdict.recommendations:
        console.print(f"  {rec.persona.value}: {rec.winner} ({rec.confidence.value}) - {rec.reason}")


@app.command()
def pairs(
    catalog: Path = CATALOG_OPTION,
    category: str = typer.Option(None, "--category", "-c", help="Only tools in this category"),
    limit: int = typer.Option(50, "--limit", "-l", min=1, help="Maximum pairs to list"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """List every comparable pair of tools in the catalog."""
    _configure_logging(verbose)
    tools = load_catalog(catalog)

    if category:
        wanted = resolve_category(category)
        if wanted is None:
            console.print(f"[red]Error:[/red] Unknown category '{category}'")
            raise typer.Exit(1)
        tools = [t for t in tools if (c := resolve_category(t.category)) and c.id == wanted.id]

    valid = all_valid_comparisons(tools)
    if not valid:
        console.print("[yellow]No comparable pairs found.[/yellow]")
        return

    table = Table(title=f"Comparable Pairs ({min(limit, len(valid))} of {len(valid)})")
    table.add_column("Slug", style="cyan")
    table.add_column("Title")

    for pair in valid[:limit]:
        a, b = pair.tool_a, pair.tool_b
        table.add_row(pair.slug, build_comparison_title(a.name, b.name, a.category, b.category))

    console.print(table)


if __name__ == "__main__":
    app()
