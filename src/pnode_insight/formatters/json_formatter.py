"""JSON analytics report."""

import json

from ..math import Statistics
from ..models import NodeStatus
from .base import BaseFormatter, ReportContext


def build_report(context: ReportContext) -> dict:
    result = context.result
    nodes = context.nodes
    by_status = {
        status.value.lower(): sum(1 for n in nodes if n.status is status) for status in NodeStatus
    }

    return {
        "generatedAt": context.generated_at.isoformat(),
        "networkStats": context.stats.to_dict(),
        "aiAnalytics": {
            "healthScore": result.health_score,
            "performanceTrend": result.performance_trend.value,
            "networkEfficiency": result.network_efficiency,
            "anomaliesCount": len(result.anomalies),
            "predictedIssuesCount": len(result.predicted_issues),
            "optimizationOpportunitiesCount": len(result.optimization_opportunities),
            "insights": [i.to_dict() for i in result.all_insights],
        },
        "nodesSummary": {
            "total": len(nodes),
            "byStatus": by_status,
            "averageMetrics": {
                "latency": context.stats.avg_latency,
                "uptime": Statistics.mean([n.uptime or 0.0 for n in nodes]),
            },
        },
    }


class JsonFormatter(BaseFormatter):
    """Render the analytics report as JSON."""

    extension = "json"

    def format(self, context: ReportContext) -> str:
        return json.dumps(build_report(context), indent=2)
