"""Configuration loading and management for go-summary.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.go-summary.toml)
    3. Project config (./go-summary.toml)
    4. Explicit config file
    5. Environment variables (GOSUMMARY_* prefix)
    6. CLI overrides (passed as kwargs)

Metric thresholds (long function, risky file, formula weights) are fixed
module constants, not configuration.

Example:
    >>> config = load_config(workers=4)
    >>> config.workers
    4
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
NestedLiterals = Literal["inline", "separate"]

ENV_PREFIX = "GOSUMMARY_"
CONFIG_FILENAME = "go-summary.toml"
MAX_WORKERS = 32

_VERBOSITIES = ("quiet", "normal", "verbose")
_NESTED_LITERAL_MODES = ("inline", "separate")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        workers: Parallel extraction workers, 1 (sequential) to MAX_WORKERS
        output_dir: Directory the three artifacts are written to
        nested_literals: "inline" counts function literals toward the
            enclosing function; "separate" measures them as their own units
        exclude_patterns: Glob patterns (relative POSIX path or file name)
            skipped during discovery, on top of the ``_test.go`` rule
        follow_symlinks: Descend into symlinked directories
        verbosity: Logging verbosity level
    """

    workers: int = 1
    output_dir: str = "."
    nested_literals: NestedLiterals = "inline"
    exclude_patterns: list[str] = field(default_factory=list)
    follow_symlinks: bool = False
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if not 1 <= self.workers <= MAX_WORKERS:
            raise InvalidConfigError(
                "workers", self.workers, f"must be between 1 and {MAX_WORKERS}"
            )
        if self.nested_literals not in _NESTED_LITERAL_MODES:
            raise InvalidConfigError(
                "nested_literals",
                self.nested_literals,
                f"must be one of: {', '.join(_NESTED_LITERAL_MODES)}",
            )
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of: {', '.join(_VERBOSITIES)}"
            )
        if not self.output_dir:
            raise InvalidConfigError("output_dir", self.output_dir, "must not be empty")

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options never mask file values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_section(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_section(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError("Config file not found", source=config_file)
        merged.update(_load_toml_section(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    if "exclude_patterns" in merged:
        merged["exclude_patterns"] = list(merged["exclude_patterns"])

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from GOSUMMARY_* environment variables.

    Supported environment variables:
        GOSUMMARY_WORKERS: int
        GOSUMMARY_OUTPUT_DIR: str
        GOSUMMARY_NESTED_LITERALS: inline/separate
        GOSUMMARY_FOLLOW_SYMLINKS: bool
        GOSUMMARY_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, str(e), source=env_key)
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot be expressed in an env var.
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_section(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its settings.

    Settings may live at the top level or under a ``[go-summary]`` table.
    """
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid config file: {e}", source=path)

    section = data.get("go-summary")
    settings = dict(section) if isinstance(section, dict) else data

    unknown = sorted(set(settings) - set(AnalysisConfig.__dataclass_fields__))
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}", source=path
        )
    return settings


def _load_toml_file(path: Path) -> dict:
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
