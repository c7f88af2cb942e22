"""Main command: analyze a Go tree and write the three reports."""

from pathlib import Path
from typing import List, Optional

import click
import typer

from ..api import analyze
from ..config import MAX_WORKERS
from ..exceptions import GoSummaryError, InvalidPathError, RenderError
from ..formatters import write_artifacts
from ..formatters.markdown_formatter import NO_FILES_MESSAGE
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config


@app.command()
def main(
    root: Path = typer.Argument(
        Path("."),
        help="Directory to analyze (default: current directory)",
        file_okay=False,
        dir_okay=True,
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output-dir",
        help="Directory the reports are written to (default: current directory)",
        file_okay=False,
        dir_okay=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel extraction workers (default: 1)",
        min=1,
        max=MAX_WORKERS,
    ),
    nested_literals: Optional[str] = typer.Option(
        None,
        "--nested-literals",
        help="Count function literals toward the enclosing function or measure them separately",
        click_type=click.Choice(["inline", "separate"], case_sensitive=False),
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Summarize a Go source tree.

    Extracts types and functions from every non-test [bold].go[/bold] file,
    computes complexity, documentation and maintainability metrics, and
    writes go_code_summary.md, go_code_summary.html and go_code_summary.json.

    [bold cyan]Examples:[/bold cyan]

      go-summary

      go-summary ./cmd/server -o reports

      go-summary --nested-literals separate --workers 4
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]go-summary[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    logger = setup_logging("quiet" if quiet else "verbose" if verbose else "normal")

    try:
        settings = resolve_config(
            config=config,
            output_dir=output_dir,
            workers=workers,
            nested_literals=nested_literals.lower() if nested_literals else None,
            verbose=verbose,
            quiet=quiet,
        )
        logger = setup_logging(settings.verbosity)
        result = analyze(root, config=settings)

        if result.is_empty:
            console.print(f"[yellow]{NO_FILES_MESSAGE}[/yellow]")
            raise typer.Exit(0)

        if settings.output_path.exists() and not settings.output_path.is_dir():
            raise InvalidPathError(settings.output_path, "output directory is a file")
        settings.output_path.mkdir(parents=True, exist_ok=True)
        written, errors = write_artifacts(result, settings.output_path)

        if errors:
            _report_render_errors(errors)
            raise typer.Exit(1)

        names = [p.name for p in written]
        console.print(f"[green]Generated {', '.join(names[:-1])}, and {names[-1]}[/green]")

    except typer.Exit:
        raise

    except GoSummaryError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(e.exit_code)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)


def _report_render_errors(errors: List[RenderError]) -> None:
    console.print(f"[red]Failed to generate {len(errors)} report(s):[/red]")
    for err in errors:
        console.print(f"  [red]-[/red] {err}")
