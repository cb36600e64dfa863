#!/usr/bin/env python3
"""Preset Engine CLI - validate, analyze, recommend and build from a preset file.

Usage:
    # Normalize a saved preset
    python main.py validate ./preset.json

    # Analysis report for a website preset without a kind tag
    python main.py analyze ./preset.json --kind website

    # Recommendations for one dimension
    python main.py recommend ./preset.json --dimension stack

    # Write init-prompt.md and development-concept.md
    python main.py build ./preset.json --output ./outputs
"""

import json
import sys
from pathlib import Path
from typing import Any, IO, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from analyzer import analyze as analyze_config
from config import DIMENSIONS, settings
from contracts import Severity
from documents import build as build_documents, describe, write_documents
from logging_config import configure_logging
from recommender import recommend as recommend_dimension, recommend_all
from validator import ConfigValidationError, validate_config


console = Console()

SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}

kind_option = click.option(
    "--kind", "-k",
    type=click.Choice(["game", "website"]),
    default=None,
    help="Configuration variant (default: the file's 'kind' field)",
)


def read_config_file(config_file: IO[str]) -> Any:
    """Parse the preset file as JSON.

    Raises:
        click.BadParameter: the file is not valid JSON
    """
    try:
        return json.load(config_file)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint="CONFIG_FILE")


def load_config(config_file: IO[str], kind: Optional[str]):
    """Read and validate a preset, exiting with status 1 on validation errors."""
    raw = read_config_file(config_file)
    try:
        return validate_config(raw, kind)
    except ConfigValidationError as exc:
        console.print(f"[red]Invalid configuration:[/red] {exc.message}")
        console.print(f"[red]Field:[/red] {exc.field_path or '<root>'}")
        if len(exc.issues) > 1:
            console.print(f"[dim]{len(exc.issues) - 1} more issue(s)[/dim]")
        sys.exit(1)


@click.group()
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Verbose output (debug logging on stderr)"
)
def cli(verbose: bool):
    """Preset Engine: configuration analysis and recommendations.

    Validates website and game presets, reports completeness and
    consistency, suggests improvements, and renders prompt documents.
    """
    configure_logging("DEBUG" if verbose else settings.log_level)


@cli.command()
@click.argument("config_file", type=click.File("r", encoding="utf-8"))
@kind_option
def validate(config_file: IO[str], kind: Optional[str]):
    """Validate a preset and print it normalized, with defaults filled."""
    config = load_config(config_file, kind)
    click.echo(json.dumps(
        config.model_dump(mode="json", by_alias=True),
        indent=settings.json_indent,
        ensure_ascii=False,
    ))


@cli.command()
@click.argument("config_file", type=click.File("r", encoding="utf-8"))
@kind_option
def analyze(config_file: IO[str], kind: Optional[str]):
    """Completeness, complexity, missing requirements and conflicts."""
    config = load_config(config_file, kind)
    report = analyze_config(config)

    console.print(Panel.fit(report.summary, title=f"[bold blue]{report.kind} analysis[/bold blue]"))

    overview = Table(show_header=False)
    overview.add_column("Metric", style="dim")
    overview.add_column("Value")
    overview.add_row("Completeness", f"{report.completeness:.0%}")
    overview.add_row("Complexity", f"{report.complexity.score}/10 ({report.complexity.label})")
    overview.add_row("Scope", report.complexity.scope_estimate)
    overview.add_row("Feasibility", report.feasibility.value)
    console.print(overview)

    if report.missing_requirements:
        missing = Table(title="Missing requirements")
        missing.add_column("Rule")
        missing.add_column("Required fields")
        missing.add_column("Message")
        for requirement in report.missing_requirements:
            missing.add_row(requirement.rule, ", ".join(requirement.required_fields), requirement.message)
        console.print(missing)

    if report.conflicts:
        conflicts = Table(title="Conflicts")
        conflicts.add_column("Severity")
        conflicts.add_column("Fields")
        conflicts.add_column("Description")
        for conflict in report.conflicts:
            style = SEVERITY_STYLES[conflict.severity]
            conflicts.add_row(
                f"[{style}]{conflict.severity.value}[/{style}]",
                " / ".join(conflict.fields),
                conflict.description,
            )
        console.print(conflicts)

    if report.suggestions:
        console.print("\n[bold]Suggestions:[/bold]")
        for suggestion in report.suggestions:
            console.print(f"  - {suggestion}")


@cli.command()
@click.argument("config_file", type=click.File("r", encoding="utf-8"))
@kind_option
@click.option(
    "--dimension", "-d",
    type=click.Choice(DIMENSIONS),
    default=None,
    help="Only this dimension (default: all six)"
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the recommendation set as JSON"
)
def recommend(config_file: IO[str], kind: Optional[str], dimension: Optional[str], as_json: bool):
    """Ranked suggestions per dimension."""
    config = load_config(config_file, kind)

    if dimension:
        results = {dimension: recommend_dimension(config, dimension)}
    else:
        results = recommend_all(config).as_dict()

    if as_json:
        click.echo(json.dumps(results, indent=settings.json_indent, ensure_ascii=False))
        return

    for name, suggestions in results.items():
        console.print(f"\n[bold]{name}[/bold] [dim](max {settings.limit_for(name)})[/dim]")
        if not suggestions:
            console.print("  [dim]No suggestions[/dim]")
        for number, suggestion in enumerate(suggestions, start=1):
            console.print(f"  {number}. {suggestion}")


@cli.command()
@click.argument("config_file", type=click.File("r", encoding="utf-8"))
@kind_option
@click.option(
    "--output", "-o", "output_dir",
    type=click.Path(file_okay=False),
    default=None,
    help=f"Output directory (default: {settings.output_dir})"
)
@click.option(
    "--print", "print_only",
    is_flag=True,
    help="Print the documents instead of writing files"
)
def build(config_file: IO[str], kind: Optional[str], output_dir: Optional[str], print_only: bool):
    """Render the init prompt and development concept documents."""
    config = load_config(config_file, kind)
    documents = build_documents(config)

    if print_only:
        for document in documents:
            click.echo(document.render())
        return

    target = Path(output_dir) if output_dir else settings.get_output_path()
    paths = write_documents(documents, target)
    console.print(f"[green]Wrote {len(paths)} document(s) for {escape(describe(config))}:[/green]")
    for path in paths:
        console.print(f"  - {path}")


if __name__ == "__main__":
    cli()
