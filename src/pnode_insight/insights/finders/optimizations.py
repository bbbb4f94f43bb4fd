"""OPTIMIZATIONS — latency headroom and geographic spread."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from ...config import DEFAULT_THRESHOLDS, ThresholdConfig
from ...math import round_half_up
from ...models import NodeRecord
from ..helpers import SnapshotAggregates, resolve_aggregates
from ..models import Insight, InsightType, Severity


def latency_optimization(
    nodes: Sequence[NodeRecord],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    now: Optional[datetime] = None,
    aggregates: Optional[SnapshotAggregates] = None,
) -> Optional[Insight]:
    agg = resolve_aggregates(nodes, aggregates)
    if agg.avg_latency <= thresholds.latency_optimization_ms:
        return None

    return Insight(
        type=InsightType.OPTIMIZATION,
        severity=Severity.MEDIUM,
        title="Latency Optimization Opportunity",
        description=(
            f"Network average latency at {round_half_up(agg.avg_latency)}ms, could be improved"
        ),
        impact="Reducing latency would improve transaction confirmation times",
        action="Consider geographic distribution of nodes and network topology optimization",
        timestamp=now or datetime.now(timezone.utc),
    )


def geographic_diversity(
    nodes: Sequence[NodeRecord],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    now: Optional[datetime] = None,
    aggregates: Optional[SnapshotAggregates] = None,
) -> Optional[Insight]:
    agg = resolve_aggregates(nodes, aggregates)
    # No nodes, no regions to be concentrated in.
    if agg.node_count == 0:
        return None
    if len(agg.locations) >= thresholds.min_regions:
        return None

    return Insight(
        type=InsightType.OPTIMIZATION,
        severity=Severity.LOW,
        title="Geographic Diversity",
        description=f"Network concentrated in {len(agg.locations)} regions",
        impact="Limited geographic diversity increases regional failure risk",
        action="Expand validator presence to additional geographic regions",
        timestamp=now or datetime.now(timezone.utc),
    )


def find_optimizations(
    nodes: Sequence[NodeRecord],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    now: Optional[datetime] = None,
    aggregates: Optional[SnapshotAggregates] = None,
) -> list[Insight]:
    """Latency opportunity first, then geographic diversity."""
    now = now or datetime.now(timezone.utc)
    agg = resolve_aggregates(nodes, aggregates)
    candidates = (
        latency_optimization(nodes, thresholds, now, agg),
        geographic_diversity(nodes, thresholds, now, agg),
    )
    return [insight for insight in candidates if insight is not None]
