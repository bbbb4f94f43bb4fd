"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config
from ..exceptions import InvalidConfigError
from ..logging_config import setup_logging

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    **overrides,
) -> AnalysisConfig:
    """Build configuration from CLI options and set up logging to match."""
    if verbose:
        overrides["verbose"] = True
    settings = load_config(config_file=config, **overrides)
    try:
        setup_logging(
            verbose=settings.verbosity == "verbose",
            quiet=settings.verbosity == "quiet",
            log_file=settings.log_file,
        )
    except OSError as e:
        raise InvalidConfigError("log_file", settings.log_file, e.strerror or str(e))
    return settings


def fail(error: Exception) -> None:
    err_console.print(f"[red]Error:[/red] {error}")
