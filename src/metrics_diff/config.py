"""Configuration loading and management for metrics-diff.

Configuration sources are merged in priority order:
    1. Defaults (defined in ReportConfig)
    2. Global config (~/.metrics-diff.toml)
    3. Project config (./metrics-diff.toml)
    4. Explicit config file (--config)
    5. Environment variables (METRICS_DIFF_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(output_format="json", verbose=True)
    >>> config.output_format
    'json'
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_args, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

# Type aliases for clarity
Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["markdown", "json", "rich"]

ENV_PREFIX = "METRICS_DIFF_"
GLOBAL_CONFIG_NAME = ".metrics-diff.toml"
PROJECT_CONFIG_NAME = "metrics-diff.toml"

DEFAULT_TITLE = "Kubernetes Metrics Changes"


@dataclass(frozen=True)
class ReportConfig:
    """Settings for one comparison run.

    Attributes:
        title: Heading of the rendered report.
        output_format: Report renderer (markdown, json, rich).
        include_details: Append a unified diff of each changed record.
        strict: Reject catalogs that declare the same metric twice instead
            of keeping the last declaration.
        verbosity: Logging verbosity level.
    """

    title: str = DEFAULT_TITLE
    output_format: OutputFormat = "markdown"
    include_details: bool = True
    strict: bool = False
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.title, str) or not self.title.strip():
            raise InvalidConfigError("title", self.title, "must be a non-empty string")
        if self.output_format not in get_args(OutputFormat):
            raise InvalidConfigError(
                "output_format",
                self.output_format,
                f"must be one of {', '.join(get_args(OutputFormat))}",
            )
        if self.verbosity not in get_args(Verbosity):
            raise InvalidConfigError(
                "verbosity",
                self.verbosity,
                f"must be one of {', '.join(get_args(Verbosity))}",
            )
        for flag in ("include_details", "strict"):
            value = getattr(self, flag)
            if not isinstance(value, bool):
                raise InvalidConfigError(flag, value, "must be true or false")

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ReportConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Validated ReportConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value is unknown or invalid
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(
                f"Config file not found: {config_file}", details={"path": str(config_file)}
            )
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    cli = {k: v for k, v in overrides.items() if v is not None}
    # Convert verbosity boolean flags to string
    if cli.pop("verbose", False):
        cli["verbosity"] = "verbose"
    if cli.pop("quiet", False):
        cli["verbosity"] = "quiet"
    merged.update(cli)

    known = ReportConfig.__dataclass_fields__
    unknown = sorted(k for k in merged if k not in known)
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown setting")

    return ReportConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from METRICS_DIFF_* environment variables.

    Supported environment variables:
        METRICS_DIFF_TITLE: str
        METRICS_DIFF_OUTPUT_FORMAT: markdown/json/rich
        METRICS_DIFF_INCLUDE_DETAILS: bool (true/false/1/0)
        METRICS_DIFF_STRICT: bool
        METRICS_DIFF_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any METRICS_DIFF_* vars found.
    """
    type_hints = get_type_hints(ReportConfig)

    result: dict[str, Any] = {}
    for field_name in ReportConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    # Strings, including Literal types like Verbosity
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    The ``[metrics-diff]`` table is used when present so settings can live in
    a shared file; otherwise top-level keys are read.

    Raises:
        ConfigurationError: If the file can't be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Fallback to tomli for Python 3.9-3.10
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(
            f"Invalid config file '{path}': {e}", details={"path": str(path)}
        ) from e

    section = data.get("metrics-diff")
    if isinstance(section, dict):
        return dict(section)
    return data
