"""CLI entry point — registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="pnode-insight",
    help="pNode Insight - health analytics for pNode network snapshots",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Analyze pNode telemetry snapshots.

    [bold cyan]Examples:[/bold cyan]

      pnode-insight analyze nodes.json

      pnode-insight export nodes.json --format markdown
    """
    if version:
        console.print(f"[bold cyan]pNode Insight[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .nodes import nodes as _nodes  # noqa: F401, E402
from .export import export as _export  # noqa: F401, E402
from .watch import watch as _watch  # noqa: F401, E402
