"""Rich terminal formatter for pNode Insight."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..insights import Severity, generate_insights_summary, rank_result
from .base import BaseFormatter, ReportContext

console = Console()

_SEVERITY_STYLE = {
    Severity.CRITICAL: "red bold",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "dim",
}


def score_style(score: int) -> str:
    """Colour band for a health score."""
    if score >= 80:
        return "green"
    elif score >= 60:
        return "yellow"
    else:
        return "red"


class RichFormatter(BaseFormatter):
    """Summary panel followed by the ranked insight table."""

    def render(self, context: ReportContext) -> None:
        self._print_summary(context)
        self._print_insights(context)

    def format(self, context: ReportContext) -> str:
        # Rich output goes directly to console; return empty string
        self.render(context)
        return ""

    def _print_summary(self, context: ReportContext) -> None:
        result = context.result
        stats = context.stats
        style = score_style(result.health_score)

        body = (
            f"[bold {style}]{result.health_score}[/bold {style}]/100 health  "
            f"[dim]|[/dim]  trend [bold]{result.performance_trend.value}[/bold]  "
            f"[dim]|[/dim]  efficiency [bold]{result.network_efficiency}%[/bold]\n"
            f"{stats.active_nodes}/{stats.total_nodes} nodes active, "
            f"{stats.total_storage:,.0f} TB storage, "
            f"{stats.avg_latency:.0f} ms average latency\n\n"
            f"{generate_insights_summary(result)}"
        )
        console.print(Panel(body, title="[bold cyan]Network Health[/bold cyan]", expand=False))

    def _print_insights(self, context: ReportContext) -> None:
        ranked = rank_result(context.result)
        if not ranked:
            console.print("[green]No insights for this snapshot.[/green]")
            return

        table = Table(show_header=True, show_lines=False, pad_edge=True)
        table.add_column("Severity")
        table.add_column("Type")
        table.add_column("Insight", min_width=28)
        table.add_column("Action")

        for insight in ranked:
            style = _SEVERITY_STYLE[insight.severity]
            table.add_row(
                f"[{style}]{insight.severity.value}[/{style}]",
                insight.type.value,
                f"[bold]{insight.title}[/bold]\n{insight.description}\n[dim]{insight.impact}[/dim]",
                insight.action or "",
            )

        console.print(table)
