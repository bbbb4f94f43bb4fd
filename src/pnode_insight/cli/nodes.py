"""Nodes command — searchable, sortable registry table."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..exceptions import PNodeInsightError
from ..models import NodeStatus
from ..snapshot import SORT_KEYS, load_snapshot, search_nodes, sort_nodes
from . import app
from ._common import console, fail, resolve_config

_STATUS_STYLE = {
    NodeStatus.ACTIVE: "green",
    NodeStatus.DELINQUENT: "yellow",
    NodeStatus.OFFLINE: "dim",
}


def _fmt(value, suffix: str = "") -> str:
    if value is None:
        return "[dim]--[/dim]"
    if isinstance(value, float):
        return f"{value:,.2f}".rstrip("0").rstrip(".") + suffix
    return f"{value}{suffix}"


@app.command()
def nodes(
    snapshot: Path = typer.Argument(..., help="Node snapshot (JSON)", dir_okay=False),
    search: str = typer.Option("", "--search", "-s", help="Filter by identity, version or location"),
    sort: str = typer.Option("latency", "--sort", help=f"Sort key: {', '.join(SORT_KEYS)}"),
    descending: bool = typer.Option(False, "--desc", help="Sort descending"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Show at most N rows"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """
    Show the node registry.

    [bold cyan]Examples:[/bold cyan]

      pnode-insight nodes nodes.json --search frankfurt

      pnode-insight nodes nodes.json --sort uptime --desc -n 20
    """
    if sort not in SORT_KEYS:
        fail(ValueError(f"Unknown sort key {sort!r}; choose from {', '.join(SORT_KEYS)}"))
        raise typer.Exit(2)

    try:
        resolve_config(verbose=verbose)
        records = load_snapshot(snapshot)
    except PNodeInsightError as e:
        fail(e)
        raise typer.Exit(1)

    rows = sort_nodes(search_nodes(records, search), sort, descending)
    if limit is not None:
        rows = rows[:limit]

    table = Table(show_header=True, title=f"pNode Registry ({len(rows)}/{len(records)})")
    table.add_column("Identity", overflow="fold")
    table.add_column("Version")
    table.add_column("Status")
    table.add_column("Latency", justify="right")
    table.add_column("Uptime", justify="right")
    table.add_column("Storage", justify="right")
    table.add_column("Location")

    for n in rows:
        style = _STATUS_STYLE[n.status]
        table.add_row(
            n.identity,
            _fmt(n.version),
            f"[{style}]{n.status.value}[/{style}]",
            _fmt(n.latency, " ms"),
            _fmt(n.uptime, "%"),
            _fmt(n.disk_space, " TB"),
            _fmt(n.location),
        )

    console.print(table)
