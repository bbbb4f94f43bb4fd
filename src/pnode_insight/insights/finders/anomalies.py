"""ANOMALIES — aggregate rules over the current snapshot.

Each rule emits at most one insight, in this order:
  1. high latency: nodes slower than twice the fleet average and above a floor
  2. unstable nodes: active nodes reporting low (or no) uptime
  3. version fragmentation: too many distinct software versions
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from ...config import DEFAULT_THRESHOLDS, ThresholdConfig
from ...math import round_half_up
from ...models import NodeRecord
from ..helpers import SnapshotAggregates, resolve_aggregates
from ..models import Insight, InsightType, Severity


def high_latency_anomaly(
    nodes: Sequence[NodeRecord],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    now: Optional[datetime] = None,
    aggregates: Optional[SnapshotAggregates] = None,
) -> Optional[Insight]:
    agg = resolve_aggregates(nodes, aggregates)
    cutoff = agg.avg_latency * thresholds.latency_anomaly_multiplier
    flagged = [
        n for n in nodes if n.latency > cutoff and n.latency > thresholds.latency_anomaly_floor_ms
    ]
    if not flagged:
        return None

    severity = (
        Severity.HIGH if len(flagged) > thresholds.latency_anomaly_high_count else Severity.MEDIUM
    )
    return Insight(
        type=InsightType.ANOMALY,
        severity=severity,
        title="High Latency Detected",
        description=(
            f"{len(flagged)} nodes showing abnormally high latency "
            f"(>{round_half_up(cutoff)}ms)"
        ),
        impact="May affect network responsiveness and user experience",
        action="Investigate network conditions and node configurations",
        timestamp=now or datetime.now(timezone.utc),
    )


def unstable_nodes_anomaly(
    nodes: Sequence[NodeRecord],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    now: Optional[datetime] = None,
) -> Optional[Insight]:
    # Unreported uptime counts as 0%, so it always flags an active node.
    unstable = [
        n for n in nodes if n.is_active and (n.uptime or 0.0) < thresholds.min_uptime_pct
    ]
    if not unstable:
        return None

    return Insight(
        type=InsightType.ANOMALY,
        severity=Severity.MEDIUM,
        title="Unstable Nodes Detected",
        description=(
            f"{len(unstable)} active nodes with uptime below "
            f"{thresholds.min_uptime_pct:g}%"
        ),
        impact="Reduced network reliability and potential data inconsistencies",
        action="Review node stability and consider replacing unreliable validators",
        timestamp=now or datetime.now(timezone.utc),
    )


def version_fragmentation_anomaly(
    nodes: Sequence[NodeRecord],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    now: Optional[datetime] = None,
    aggregates: Optional[SnapshotAggregates] = None,
) -> Optional[Insight]:
    agg = resolve_aggregates(nodes, aggregates)
    if len(agg.versions) <= thresholds.max_versions:
        return None

    return Insight(
        type=InsightType.ANOMALY,
        severity=Severity.LOW,
        title="Version Fragmentation",
        description=f"Network running {len(agg.versions)} different versions",
        impact="May lead to consensus issues and reduced performance",
        action="Encourage validators to upgrade to latest stable version",
        timestamp=now or datetime.now(timezone.utc),
    )


def detect_anomalies(
    nodes: Sequence[NodeRecord],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    now: Optional[datetime] = None,
    aggregates: Optional[SnapshotAggregates] = None,
) -> list[Insight]:
    """Run the three anomaly rules; latency, uptime, versions."""
    now = now or datetime.now(timezone.utc)
    agg = resolve_aggregates(nodes, aggregates)
    candidates = (
        high_latency_anomaly(nodes, thresholds, now, agg),
        unstable_nodes_anomaly(nodes, thresholds, now),
        version_fragmentation_anomaly(nodes, thresholds, now, agg),
    )
    return [insight for insight in candidates if insight is not None]
