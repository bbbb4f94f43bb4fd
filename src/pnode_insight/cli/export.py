"""Export command — write CSV, JSON or Markdown reports."""

import time
from pathlib import Path
from typing import Optional

import typer

from ..exceptions import ExportError, PNodeInsightError
from ..formatters import EXPORT_FORMATS, ReportContext, get_formatter
from ..snapshot import load_snapshot
from . import app
from ._common import console, fail, resolve_config


def default_filename(fmt: str, prefix: str, millis: Optional[int] = None) -> str:
    millis = int(time.time() * 1000) if millis is None else millis
    if fmt == "csv":
        return f"{prefix}-nodes.csv"
    if fmt == "json":
        return f"{prefix}-ai-report-{millis}.json"
    if fmt == "markdown":
        return f"{prefix}-report-{millis}.md"
    raise ExportError(fmt, f"unsupported format; choose from {', '.join(EXPORT_FORMATS)}")


def write_export(context: ReportContext, fmt: str, output: Path) -> Path:
    if fmt not in EXPORT_FORMATS:
        raise ExportError(fmt, f"unsupported format; choose from {', '.join(EXPORT_FORMATS)}")
    content = get_formatter(fmt).format(context)
    try:
        output.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ExportError(fmt, f"cannot write {output}: {e.strerror or e}")
    return output


@app.command()
def export(
    snapshot: Path = typer.Argument(..., help="Node snapshot (JSON)", dir_okay=False),
    fmt: str = typer.Option(
        "json",
        "--format",
        "-f",
        help=f"Export format: {', '.join(EXPORT_FORMATS)}",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
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
    Export the registry (CSV) or the analytics report (JSON, Markdown).

    [bold cyan]Examples:[/bold cyan]

      pnode-insight export nodes.json --format csv

      pnode-insight export nodes.json -f markdown -o report.md
    """
    try:
        settings = resolve_config(config=config, verbose=verbose)
        nodes = load_snapshot(snapshot)
        context = ReportContext.build(nodes, settings.thresholds, top_nodes=settings.top_nodes)
        target = output or Path(default_filename(fmt, settings.export_prefix))
        path = write_export(context, fmt, target)
    except PNodeInsightError as e:
        fail(e)
        raise typer.Exit(1)

    console.print(f"Export saved to: [bold green]{path}[/bold green]")
