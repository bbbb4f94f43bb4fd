"""Markdown network report."""

from ..math import Statistics, round_half_up
from ..snapshot import top_performers
from .base import BaseFormatter, ReportContext


def _insight_lines(insights, with_severity: bool = True) -> list[str]:
    if with_severity:
        return [f"- **{i.title}** [{i.severity.value}]: {i.description}" for i in insights]
    return [f"- **{i.title}**: {i.description}" for i in insights]


class MarkdownFormatter(BaseFormatter):
    extension = "md"

    def format(self, context: ReportContext) -> str:
        stats = context.stats
        result = context.result
        active_pct = round_half_up(
            Statistics.ratio(stats.active_nodes, stats.total_nodes) * 100
        )

        lines = [
            "# pNode Network Report",
            f"Generated: {context.generated_at.strftime('%Y-%m-%d %H:%M:%S %Z').strip()}",
            "",
            "## Network Overview",
            f"- **Total Nodes**: {stats.total_nodes}",
            f"- **Active Nodes**: {stats.active_nodes} ({active_pct}%)",
            f"- **Total Storage**: {stats.total_storage:,.0f} TB",
            f"- **Average Latency**: {round_half_up(stats.avg_latency)} ms",
            "",
            "## Analytics",
            f"- **Health Score**: {result.health_score}/100",
            f"- **Performance Trend**: {result.performance_trend.value}",
            f"- **Network Efficiency**: {result.network_efficiency}%",
            "",
            f"### Anomalies Detected ({len(result.anomalies)})",
            *_insight_lines(result.anomalies),
            "",
            f"### Predicted Issues ({len(result.predicted_issues)})",
            *_insight_lines(result.predicted_issues),
            "",
            f"### Optimization Opportunities ({len(result.optimization_opportunities)})",
            *_insight_lines(result.optimization_opportunities, with_severity=False),
            "",
            "## Top Performing Nodes",
        ]
        for i, node in enumerate(top_performers(context.nodes, context.top_nodes), start=1):
            lines.append(f"{i}. {node.identity} - {node.latency:g}ms latency")

        return "\n".join(lines) + "\n"
