"""Configuration loading and management for pNode Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.pnode-insight.toml)
    3. Project config (./pnode-insight.toml)
    4. Explicit config file
    5. Environment variables (PNODE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(top_nodes=10)
    >>> config.top_nodes
    10
    >>> config.thresholds.min_uptime_pct
    95.0
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, Union, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]


@dataclass(frozen=True)
class ThresholdConfig:
    """Heuristic thresholds used by the detection rules.

    The defaults are the fixed thresholds the dashboard has always used.
    They are exposed here so an operator can tune them per network, not
    because the rules are meant to adapt on their own.

    Attributes:
        Trend bands:
            trend_improving_above: score strictly above this is "improving"
            trend_stable_above: score strictly above this is "stable"

        High latency anomaly:
            latency_anomaly_multiplier: node latency must exceed avg * this
            latency_anomaly_floor_ms: node latency must also exceed this
            latency_anomaly_high_count: more flagged nodes than this -> high

        Unstable nodes:
            min_uptime_pct: active nodes below this uptime are flagged

        Version fragmentation:
            max_versions: more distinct versions than this is fragmented

        Availability risk:
            availability_warn_ratio: active ratio below this -> high
            availability_critical_ratio: active ratio below this -> critical

        Storage capacity:
            min_avg_storage_tb: average storage below this -> prediction

        Optimizations:
            latency_optimization_ms: average latency above this -> opportunity
            min_regions: fewer distinct locations than this -> opportunity
    """

    # === Trend ===
    trend_improving_above: float = 80.0
    trend_stable_above: float = 60.0

    # === Anomalies ===
    latency_anomaly_multiplier: float = 2.0
    latency_anomaly_floor_ms: float = 100.0
    latency_anomaly_high_count: int = 5
    min_uptime_pct: float = 95.0
    max_versions: int = 3

    # === Predictions ===
    availability_warn_ratio: float = 0.85
    availability_critical_ratio: float = 0.70
    min_avg_storage_tb: float = 50.0

    # === Optimizations ===
    latency_optimization_ms: float = 100.0
    min_regions: int = 3

    def __post_init__(self) -> None:
        """Validate threshold configuration."""
        if not 0.0 <= self.trend_stable_above <= self.trend_improving_above <= 100.0:
            raise ValueError(
                "trend bands must satisfy 0 <= trend_stable_above <= trend_improving_above <= 100"
            )

        if not 0.0 <= self.availability_critical_ratio <= self.availability_warn_ratio <= 1.0:
            raise ValueError(
                "availability ratios must satisfy "
                "0 <= availability_critical_ratio <= availability_warn_ratio <= 1"
            )

        if not 0.0 <= self.min_uptime_pct <= 100.0:
            raise ValueError("min_uptime_pct must be between 0 and 100")

        if self.latency_anomaly_multiplier <= 0:
            raise ValueError("latency_anomaly_multiplier must be positive")

        for field_name in (
            "latency_anomaly_floor_ms",
            "min_avg_storage_tb",
            "latency_optimization_ms",
        ):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must be non-negative")

        for field_name in ("latency_anomaly_high_count", "max_versions", "min_regions"):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must be non-negative")


# Default threshold configuration (singleton)
DEFAULT_THRESHOLDS = ThresholdConfig()


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for the analytics CLI.

    Attributes:
        poll_interval_seconds: Refresh cadence used by ``watch``
        top_nodes: Number of lowest-latency nodes listed in reports
        export_prefix: Filename prefix for export files
        verbosity: Logging verbosity level
        log_file: Append log records to this file (INFO and above)
        thresholds: Detection rule thresholds
    """

    poll_interval_seconds: float = 30.0
    top_nodes: int = 5
    export_prefix: str = "pnode-insight"
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.poll_interval_seconds <= 0:
            raise ValueError("poll_interval_seconds must be positive")
        if self.top_nodes < 1:
            raise ValueError("top_nodes must be at least 1")
        if not self.export_prefix:
            raise ValueError("export_prefix must not be empty")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of quiet, normal, verbose")


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".pnode-insight.toml"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / "pnode-insight.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    thresholds_dict = merged.pop("thresholds", None)
    if thresholds_dict is not None:
        if isinstance(thresholds_dict, ThresholdConfig):
            merged["thresholds"] = thresholds_dict
        elif isinstance(thresholds_dict, dict):
            try:
                merged["thresholds"] = ThresholdConfig(**thresholds_dict)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid [thresholds] config: {e}")
        else:
            raise InvalidConfigError("thresholds", thresholds_dict, "expected a table")

    try:
        return AnalysisConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from PNODE_* environment variables.

    Supported environment variables:
        PNODE_POLL_INTERVAL_SECONDS: float
        PNODE_TOP_NODES: int
        PNODE_EXPORT_PREFIX: str
        PNODE_VERBOSITY: quiet/normal/verbose
        PNODE_LOG_FILE: str (empty means no log file)

    Returns:
        Dict of field_name -> parsed_value for any PNODE_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        if field_name == "thresholds":
            continue
        env_key = f"PNODE_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is Union:
        args = [a for a in type_hint.__args__ if a is not type(None)]
        if len(args) != 1:
            return None
        return _parse_env_value(value, args[0]) if value else None

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
    """
    try:
        # Python 3.11+ has tomllib in stdlib
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
