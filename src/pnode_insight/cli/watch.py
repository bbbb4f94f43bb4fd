"""Watch command — re-analyze a snapshot file on a fixed timer."""

import time
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from ..exceptions import PNodeInsightError
from ..insights import AnalyticsEngine, generate_insights_summary
from ..logging_config import get_logger
from ..snapshot import load_snapshot
from . import app
from ._common import console, fail, resolve_config
from .analyze import _score_markup

logger = get_logger(__name__)


def run_tick(engine: AnalyticsEngine, snapshot: Path) -> Optional[str]:
    """Analyze the snapshot once; None when it could not be read this tick."""
    try:
        nodes = load_snapshot(snapshot)
    except PNodeInsightError as e:
        logger.warning(f"Skipping refresh: {e}")
        return None

    result = engine.analyze(nodes)
    logger.info(f"Refreshed {len(nodes)} nodes, score {result.health_score}")
    return f"{_score_markup(result.health_score)} {generate_insights_summary(result)}"


@app.command()
def watch(
    snapshot: Path = typer.Argument(..., help="Node snapshot (JSON)", dir_okay=False),
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        "-i",
        min=0.0,
        help="Seconds between refreshes (default: poll_interval_seconds)",
    ),
    iterations: Optional[int] = typer.Option(
        None,
        "--iterations",
        "-n",
        min=1,
        help="Stop after N refreshes (default: run until interrupted)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Append refresh history to this file (INFO and above)",
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Re-read and re-analyze a snapshot file every few seconds.

    Each refresh is independent: nothing carries over between ticks, so a
    score hovering around a trend boundary can change label every tick.

    [bold cyan]Examples:[/bold cyan]

      pnode-insight watch nodes.json

      pnode-insight watch nodes.json --interval 5 --iterations 12

      pnode-insight watch nodes.json --log-file watch.log
    """
    try:
        settings = resolve_config(
            config=config,
            verbose=verbose,
            log_file=str(log_file) if log_file is not None else None,
        )
    except PNodeInsightError as e:
        fail(e)
        raise typer.Exit(1)

    delay = settings.poll_interval_seconds if interval is None else interval
    engine = AnalyticsEngine(settings.thresholds)

    tick = 0
    try:
        while True:
            line = run_tick(engine, snapshot)
            stamp = datetime.now().strftime("%H:%M:%S")
            if line is None:
                console.print(f"[dim]{stamp}[/dim] [yellow]snapshot unavailable[/yellow]")
            else:
                console.print(f"[dim]{stamp}[/dim] {line}")

            tick += 1
            if iterations is not None and tick >= iterations:
                break
            time.sleep(delay)
    except KeyboardInterrupt:
        console.print("\n[dim]Stopped.[/dim]")
