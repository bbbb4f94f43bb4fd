"""Network health analytics engine.

A pure function of the current snapshot: no state is kept between calls
and nothing here performs I/O, so concurrent callers on independent
snapshots need no coordination.

Usage:
    result = analyze_network_health(nodes)
    print(generate_insights_summary(result))
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..logging_config import get_logger
from ..models import NodeRecord
from .finders import detect_anomalies, find_optimizations, predict_issues
from .helpers import SnapshotAggregates
from .models import AnalyticsResult
from .scoring import classify_trend, compute_efficiency, compute_health_score

logger = get_logger(__name__)


def analyze_network_health(
    nodes: Sequence[NodeRecord],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    now: Optional[datetime] = None,
) -> AnalyticsResult:
    """Score the snapshot and collect every insight it triggers.

    Args:
        nodes: Snapshot of node records, possibly empty
        thresholds: Detection thresholds (defaults to the fixed heuristics)
        now: Timestamp stamped on every insight of this analysis

    Returns:
        AnalyticsResult for this snapshot
    """
    now = now or datetime.now(timezone.utc)
    aggregates = SnapshotAggregates.from_nodes(nodes)

    health_score = compute_health_score(nodes, aggregates)
    result = AnalyticsResult(
        health_score=health_score,
        performance_trend=classify_trend(health_score, thresholds),
        network_efficiency=compute_efficiency(nodes, aggregates),
        anomalies=detect_anomalies(nodes, thresholds, now, aggregates),
        predicted_issues=predict_issues(nodes, thresholds, now, aggregates),
        optimization_opportunities=find_optimizations(nodes, thresholds, now, aggregates),
    )

    logger.debug(
        "Analyzed %d nodes: score=%d trend=%s efficiency=%d "
        "anomalies=%d predictions=%d optimizations=%d",
        aggregates.node_count,
        result.health_score,
        result.performance_trend.value,
        result.network_efficiency,
        len(result.anomalies),
        len(result.predicted_issues),
        len(result.optimization_opportunities),
    )
    return result


class AnalyticsEngine:
    """Holds a threshold configuration and analyzes snapshots with it."""

    def __init__(self, thresholds: ThresholdConfig = DEFAULT_THRESHOLDS):
        self.thresholds = thresholds

    def analyze(
        self, nodes: Sequence[NodeRecord], now: Optional[datetime] = None
    ) -> AnalyticsResult:
        return analyze_network_health(nodes, self.thresholds, now)
