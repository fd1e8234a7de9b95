"""Typer CLI — ``stackrules generate`` and ``stackrules detect`` commands."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stackrules.config import ConfigError, resolve_config
from stackrules.detection.manifest import ManifestError, ManifestNotFoundError
from stackrules.generator import generate_rules, write_rules
from stackrules.schemas.config import RulesConfig
from stackrules.schemas.result import GenerationResult

app = typer.Typer(
    name="stackrules",
    help="Detect a frontend project's tech stack and write version-aware AI coding rules.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_config_or_exit(root: Path, config: Path | None) -> RulesConfig:
    try:
        return resolve_config(root, config)
    except (FileNotFoundError, ConfigError, ValidationError) as exc:
        console.print(f"[red]Config validation failed:[/] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1)


def _generate_or_exit(root: Path, cfg: RulesConfig) -> GenerationResult:
    try:
        return generate_rules(root, cfg)
    except ManifestNotFoundError:
        console.print(f"[red]Error:[/] {cfg.manifest_path} not found in {root.resolve()}", soft_wrap=True)
        raise typer.Exit(code=1)
    except ManifestError as exc:
        console.print(f"[red]Error:[/] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1)


@app.command()
def generate(
    root: Path = typer.Argument(Path("."), help="Project root containing package.json."),
    config: Path = typer.Option(None, "--config", "-c", help="Path to .stackrules.yml"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the rules here instead of .cursorrules."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the rules document instead of writing it."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Generate the rules document for a project.

    Examples:

        stackrules generate

        stackrules generate ./web --output ./web/.cursor/rules.md
    """
    _setup_logging(verbose)

    cfg = _load_config_or_exit(root, config)
    if output is not None:
        # --output is taken relative to the working directory, like any CLI path
        cfg = cfg.model_copy(update={"output_path": str(output.resolve())})

    result = _generate_or_exit(root, cfg)

    if dry_run:
        console.print(result.document, markup=False, highlight=False, emoji=False, soft_wrap=True)
        return

    result = write_rules(result)
    console.print(f"[green]Rules written to:[/] {result.output_path}", soft_wrap=True)
    console.print(f"  Tech fingerprint: {result.fingerprint.text}", markup=False, highlight=False, soft_wrap=True)


@app.command()
def detect(
    root: Path = typer.Argument(Path("."), help="Project root containing package.json."),
    config: Path = typer.Option(None, "--config", "-c", help="Path to .stackrules.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Show the detected context, fingerprint and documentation links without writing anything."""
    _setup_logging(verbose)

    cfg = _load_config_or_exit(root, config)
    result = _generate_or_exit(root, cfg)
    ctx = result.context
    fp = result.fingerprint

    table = Table(title="Detected stack")
    table.add_column("Category", style="bold")
    table.add_column("Label")
    table.add_row("Framework", f"{ctx.framework} (major {ctx.major})")
    table.add_row("Language", ctx.language)
    if ctx.platform:
        table.add_row("Platform", f"{ctx.platform_name} ({ctx.platform})")
    table.add_row("UI", fp.ui or "—")
    table.add_row("Bundler", fp.bundler or "—")
    table.add_row("CSS", fp.css)
    table.add_row("State", fp.state or "—")
    table.add_row("HTTP", fp.http or "—")
    console.print(table)

    console.print(f"\n[bold]Tech fingerprint:[/] {fp.text}", soft_wrap=True)
    if result.doc_lines:
        console.print("[bold]Documentation:[/]")
        for line in result.doc_lines:
            console.print(f"  {line}", markup=False, highlight=False, soft_wrap=True)
    else:
        console.print("[yellow]No registered documentation for this stack.[/]")
