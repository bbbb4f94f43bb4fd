"""Analyze command — score a snapshot and list its insights."""

import json
from pathlib import Path
from typing import Optional

import typer

from ..exceptions import PNodeInsightError
from ..formatters import ReportContext, RichFormatter
from ..formatters.rich_formatter import score_style
from ..insights import generate_insights_summary, rank_result
from ..snapshot import load_snapshot
from . import app
from ._common import fail, resolve_config


def _score_markup(score: int) -> str:
    style = score_style(score)
    return f"[bold {style}]{score:>3}[/bold {style}]"


@app.command()
def analyze(
    snapshot: Path = typer.Argument(
        ...,
        help="Node snapshot (JSON list of node records)",
        dir_okay=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
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
    Compute the health score, trend, efficiency and insights for a snapshot.

    [bold cyan]Examples:[/bold cyan]

      pnode-insight analyze nodes.json

      pnode-insight analyze nodes.json --json
    """
    try:
        settings = resolve_config(config=config, verbose=verbose)
        nodes = load_snapshot(snapshot)
    except PNodeInsightError as e:
        fail(e)
        raise typer.Exit(1)

    context = ReportContext.build(nodes, settings.thresholds, top_nodes=settings.top_nodes)

    if json_output:
        payload = context.result.to_dict()
        payload["summary"] = generate_insights_summary(context.result)
        payload["rankedInsights"] = [i.to_dict() for i in rank_result(context.result)]
        print(json.dumps(payload, indent=2))
        return

    RichFormatter().render(context)
