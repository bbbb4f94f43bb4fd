"""PREDICTIONS — availability and storage capacity risks.

An empty snapshot predicts nothing: a zero active ratio or zero average
storage over no nodes is absence of data, not a capacity problem.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from ...config import DEFAULT_THRESHOLDS, ThresholdConfig
from ...math import round_half_up
from ...models import NodeRecord
from ..helpers import SnapshotAggregates, resolve_aggregates
from ..models import Insight, InsightType, Severity


def availability_risk(
    nodes: Sequence[NodeRecord],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    now: Optional[datetime] = None,
    aggregates: Optional[SnapshotAggregates] = None,
) -> Optional[Insight]:
    agg = resolve_aggregates(nodes, aggregates)
    if agg.node_count == 0:
        return None
    ratio = agg.active_ratio
    if ratio >= thresholds.availability_warn_ratio:
        return None

    severity = (
        Severity.CRITICAL if ratio < thresholds.availability_critical_ratio else Severity.HIGH
    )
    return Insight(
        type=InsightType.PREDICTION,
        severity=severity,
        title="Network Availability Risk",
        description=(
            f"Active node ratio at {round_half_up(ratio * 100)}%, below optimal threshold"
        ),
        impact="Risk of reduced network capacity and slower transaction processing",
        action="Monitor node status and prepare failover strategies",
        timestamp=now or datetime.now(timezone.utc),
    )


def storage_capacity_risk(
    nodes: Sequence[NodeRecord],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    now: Optional[datetime] = None,
    aggregates: Optional[SnapshotAggregates] = None,
) -> Optional[Insight]:
    agg = resolve_aggregates(nodes, aggregates)
    if agg.node_count == 0:
        return None
    if agg.avg_storage >= thresholds.min_avg_storage_tb:
        return None

    return Insight(
        type=InsightType.PREDICTION,
        severity=Severity.MEDIUM,
        title="Storage Capacity Planning",
        description=(
            f"Average node storage at {round_half_up(agg.avg_storage)}TB, may need expansion"
        ),
        impact="Future storage constraints could limit network growth",
        action="Plan for storage expansion across validator infrastructure",
        timestamp=now or datetime.now(timezone.utc),
    )


def predict_issues(
    nodes: Sequence[NodeRecord],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    now: Optional[datetime] = None,
    aggregates: Optional[SnapshotAggregates] = None,
) -> list[Insight]:
    """Availability risk first, then storage capacity."""
    now = now or datetime.now(timezone.utc)
    agg = resolve_aggregates(nodes, aggregates)
    candidates = (
        availability_risk(nodes, thresholds, now, agg),
        storage_capacity_risk(nodes, thresholds, now, agg),
    )
    return [insight for insight in candidates if insight is not None]
