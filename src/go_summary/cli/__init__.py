"""CLI entry point for go-summary."""

import typer

from ._common import console

app = typer.Typer(
    name="go-summary",
    help="go-summary - Go source tree quality summary",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .analyze import main as _main  # noqa: F401, E402

__all__ = ["app", "console"]
