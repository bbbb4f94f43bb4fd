"""
pNode Insight - Health analytics for pNode networks

Turns a snapshot of per-node telemetry into a bounded health score, a
trend label, a network efficiency figure and a ranked set of insights:
anomalies, predicted issues and optimization opportunities. Every
analysis is a pure function of the snapshot it is given.
"""

__version__ = "0.1.0"

from .insights import (
    AnalyticsEngine,
    AnalyticsResult,
    Insight,
    analyze_network_health,
    generate_insights_summary,
    rank_insights,
)
from .models import NetworkStats, NodeRecord, NodeStatus

__all__ = [
    "analyze_network_health",  # Main entry point
    "AnalyticsEngine",
    "AnalyticsResult",
    "Insight",
    "NodeRecord",
    "NodeStatus",
    "NetworkStats",
    "generate_insights_summary",
    "rank_insights",
]
