"""
Command-line interface for Auto SEO Headings.

Provides a CLI for analyzing post content and transforming blocks.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .block_parser import BlockParseError, load_blocks
from .config import AnalyzerConfig
from .engine import SuggestionEngine
from .transform import InvalidHeadingLevelError, transform_to_heading, transform_to_paragraph

console = Console()


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
def main(verbose: bool) -> None:
    """
    Auto SEO Headings - Suggest paragraph-to-heading conversions.

    Examples:

        auto-seo-headings analyze post.html --title "Pizza Napoletana" -k pizza

        auto-seo-headings transform "<p>Hello</p>" --level 3
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--title", "-t", type=str, default="", help="Document title.")
@click.option("--keyword", "-k", type=str, default=None, help="Optional focus keyword.")
@click.option(
    "--include-headings",
    is_flag=True,
    default=False,
    help="Also analyze existing headings (live editor behavior).",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print suggestions as JSON.",
)
def analyze(
    source: Path,
    title: str,
    keyword: Optional[str],
    include_headings: bool,
    as_json: bool,
) -> None:
    """Analyze SOURCE (block markup or HTML) and list heading suggestions."""
    config = AnalyzerConfig.live_editor() if include_headings else AnalyzerConfig.persisted()

    try:
        blocks = load_blocks(source.read_text(encoding="utf-8"))
    except BlockParseError as e:
        console.print(f"[red]Block parsing error:[/red] {e}")
        sys.exit(1)

    suggestions = SuggestionEngine(config).analyze(blocks, title, keyword)

    if as_json:
        click.echo(json.dumps([s.to_dict() for s in suggestions], ensure_ascii=False, indent=2))
        return

    console.print(Panel.fit(
        f"[bold blue]Auto SEO Headings[/bold blue]\n"
        f"{len(blocks)} blocks analyzed, {len(suggestions)} suggestions",
        border_style="blue",
    ))
    _display_suggestions(suggestions)


@main.command()
@click.argument("markup", type=str)
@click.option("--level", "-l", type=int, default=2, help="Heading level (2 or 3).")
@click.option(
    "--to-paragraph",
    is_flag=True,
    default=False,
    help="Convert heading markup back to a paragraph instead.",
)
def transform(markup: str, level: int, to_paragraph: bool) -> None:
    """Transform MARKUP into a heading (or back into a paragraph)."""
    if to_paragraph:
        click.echo(transform_to_paragraph(markup))
        return

    try:
        click.echo(transform_to_heading(markup, level))
    except InvalidHeadingLevelError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def _display_suggestions(suggestions) -> None:
    """Display suggestions as a table."""
    if not suggestions:
        console.print("[yellow]No suggestions found.[/yellow]")
        return

    table = Table(title="Heading Suggestions", show_header=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Current", style="cyan")
    table.add_column("Suggested", style="green")
    table.add_column("Confidence", justify="right")
    table.add_column("Text")
    table.add_column("Reasons", style="dim")

    for suggestion in suggestions:
        current = f"H{suggestion.current_level}" if suggestion.current_level else "Paragraph"
        confidence_style = "green" if suggestion.is_high_confidence else "yellow"
        table.add_row(
            str(suggestion.block_index),
            current,
            f"H{suggestion.suggested_level}",
            f"[{confidence_style}]{suggestion.confidence}[/{confidence_style}]",
            suggestion.text_content,
            "\n".join(suggestion.reasons),
        )

    console.print(table)


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
