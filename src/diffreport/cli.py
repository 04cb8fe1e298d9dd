"""diffreport CLI: Typer application with compare and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from diffreport import __version__

app = typer.Typer(
    name="diffreport",
    help="Compare two text files and render an annotated side-by-side report.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _setup_logging(verbose: bool, debug: bool) -> None:
    """Route library logging through Rich on stderr."""
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=debug)],
        force=True,
    )


# ── compare ───────────────────────────────────────────────────────────────────


@app.command()
def compare(
    original: str = typer.Argument(..., help="Path to the original file"),
    revised: str = typer.Argument(..., help="Path to the revised file"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .diffreport.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: html | json | terminal"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
    no_originals: bool = typer.Option(False, "--no-originals", help="Omit the unannotated input tables"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Omit the colour legend"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Compare ORIGINAL with REVISED. Exit 0 if identical, 1 if they differ."""
    from diffreport.config.loader import ConfigError, load_config
    from diffreport.config.schema import REPORT_FORMATS
    from diffreport.diff.comparator import compare_files
    from diffreport.output import html_report, json_report, terminal
    from diffreport.output.html_report import ReportError

    _setup_logging(verbose, debug)

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        if format not in REPORT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.report.format = format  # type: ignore[assignment]
    if no_originals:
        cfg.report.show_originals = False
    if no_legend:
        cfg.report.show_legend = False

    # --- Compare ---
    comparison = compare_files(original, revised, cfg)
    if comparison is None:
        console.print("[bold red]Error:[/bold red] no comparison possible, input file missing")
        raise typer.Exit(code=2)

    if comparison.failed:
        console.print("[yellow]Diff computation failed for at least one file.[/yellow]")

    # --- Output ---
    if cfg.report.format == "html":
        try:
            path = html_report.write(comparison, output or cfg.report.output, cfg.report)
        except ReportError as exc:
            console.print(f"[bold red]Report error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc
        console.print(f"[green]✓[/green] Report written to {path}")
    elif cfg.report.format == "json":
        report_text = json_report.render(comparison)
        print(report_text)
        if output:
            Path(output).write_text(report_text, encoding="utf-8")
            if verbose:
                console.print(f"[dim]Report written to {output}[/dim]")
    else:
        terminal.render(comparison, console=Console())
        if output:
            # Terminal output cannot be saved as-is; write JSON instead
            Path(output).write_text(json_report.render(comparison), encoding="utf-8")
            if verbose:
                console.print(f"[dim]JSON report written to {output}[/dim]")

    # --- Exit code ---
    if comparison.failed or comparison.has_changes:
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .diffreport.toml in the current directory."""
    from diffreport.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"diffreport {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """diffreport: annotated side-by-side diffs of two text files."""
