"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    workers: Optional[int] = None,
    nested_literals: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build the configuration from CLI options."""
    overrides = {}
    if output_dir is not None:
        overrides["output_dir"] = str(output_dir)
    if workers is not None:
        overrides["workers"] = workers
    if nested_literals is not None:
        overrides["nested_literals"] = nested_literals
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
