"""Typer CLI for oasfindings: lint API description documents against schemas."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from oasfindings.config import LintConfig
from oasfindings.detection.variant import VARIANT_MARKERS, detect_variant
from oasfindings.documents.loader import load_document
from oasfindings.exceptions import OasFindingsError
from oasfindings.export.findings_json import write_findings
from oasfindings.models.findings import Finding
from oasfindings.pipeline.process import process

app = typer.Typer(
    name="oasfindings",
    help="Turn JSON Schema errors for OpenAPI documents into readable findings.",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("-v", "--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _format_path(path: list[str]) -> str:
    return "/".join(path) if path else "#"


def _print_findings(findings: list[Finding]) -> None:
    table = Table(title="Findings")
    table.add_column("Path", style="bold")
    table.add_column("Message")
    for finding in findings:
        table.add_row(escape(_format_path(finding.path)), escape(finding.message))
    console.print(table)


@app.command()
def lint(
    path: Annotated[Path, typer.Argument(help="Path to an OpenAPI/Swagger document")],
    schema: Annotated[
        list[str] | None,
        typer.Option(
            "-s", "--schema", help="Schema for a variant, as VARIANT=PATH (repeatable)"
        ),
    ] = None,
    output: Annotated[
        Path | None, typer.Option("-o", "--output", help="Write findings to a JSON file")
    ] = None,
    fail: Annotated[
        bool, typer.Option("--fail/--no-fail", help="Exit 1 when findings are reported")
    ] = True,
) -> None:
    """Validate a document and report its findings."""
    try:
        config = LintConfig.from_options(schema or [], fail_on_findings=fail)
        document = load_document(path)
        registry = config.build_registry()
    except OasFindingsError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    variant = detect_variant(document)
    console.print(f"Linting [bold]{escape(str(path))}[/bold] as {variant.value}...")
    if variant not in registry:
        console.print(f"[yellow]No schema configured for {variant.value}, skipping.[/yellow]")

    findings = process(document, registry)

    if output is not None:
        write_findings(findings, output)
        console.print(f"[green]Findings:[/green] {output}")

    if not findings:
        console.print("[green]No findings.[/green]")
        return

    _print_findings(findings)
    console.print(f"[red]Found {len(findings)} finding(s).[/red]")
    if config.fail_on_findings:
        raise typer.Exit(1)


@app.command()
def detect(
    path: Annotated[Path, typer.Argument(help="Path to an OpenAPI/Swagger document")],
) -> None:
    """Print the schema variant a document declares."""
    try:
        document = load_document(path)
    except OasFindingsError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
    console.print(detect_variant(document).value)


@app.command("list-variants")
def list_variants() -> None:
    """List the supported schema variants."""
    table = Table(title="Schema Variants")
    table.add_column("Variant", style="bold")
    table.add_column("Field")
    table.add_column("Version prefix")

    for variant, (field, prefix) in VARIANT_MARKERS.items():
        table.add_row(variant.value, field, prefix)

    console.print(table)
