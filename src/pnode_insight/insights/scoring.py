"""Health score, trend and efficiency: weighted blends over snapshot aggregates.

The latency terms are floored at zero but not capped at one. A fleet with
an average latency near zero can therefore push the health score or the
efficiency above 100; the result is reported as computed.

An empty snapshot scores 0 on both measures. Its zero "average" latency
would otherwise earn the full latency weight.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..math import round_half_up
from ..models import NodeRecord
from .helpers import SnapshotAggregates, resolve_aggregates
from .models import Trend

# Health score weights (sum = 100)
ACTIVE_WEIGHT = 40
LATENCY_WEIGHT = 30
UPTIME_WEIGHT = 30
LATENCY_BUDGET_MS = 200.0

# Efficiency weights (sum = 100)
EFFICIENCY_ACTIVE_WEIGHT = 50
EFFICIENCY_LATENCY_WEIGHT = 50
EFFICIENCY_LATENCY_BUDGET_MS = 150.0


def _latency_term(avg_latency: float, budget_ms: float) -> float:
    return max(0.0, (budget_ms - avg_latency) / budget_ms)


def compute_health_score(
    nodes: Sequence[NodeRecord],
    aggregates: Optional[SnapshotAggregates] = None,
) -> int:
    """Blend active ratio, latency and uptime into a 0-100 score.

    score = round(active_ratio*40 + max(0, (200-avg_latency)/200)*30 + avg_uptime/100*30)
    """
    agg = resolve_aggregates(nodes, aggregates)
    if agg.node_count == 0:
        return 0
    score = (
        agg.active_ratio * ACTIVE_WEIGHT
        + _latency_term(agg.avg_latency, LATENCY_BUDGET_MS) * LATENCY_WEIGHT
        + (agg.avg_uptime / 100) * UPTIME_WEIGHT
    )
    return round_half_up(score)


def classify_trend(
    health_score: float, thresholds: ThresholdConfig = DEFAULT_THRESHOLDS
) -> Trend:
    """Map a health score onto a trend label. No hysteresis."""
    if health_score > thresholds.trend_improving_above:
        return Trend.IMPROVING
    if health_score > thresholds.trend_stable_above:
        return Trend.STABLE
    return Trend.DEGRADING


def compute_efficiency(
    nodes: Sequence[NodeRecord],
    aggregates: Optional[SnapshotAggregates] = None,
) -> int:
    """round(active_ratio*50 + max(0, (150-avg_latency)/150)*50)"""
    agg = resolve_aggregates(nodes, aggregates)
    if agg.node_count == 0:
        return 0
    efficiency = agg.active_ratio * EFFICIENCY_ACTIVE_WEIGHT + (
        _latency_term(agg.avg_latency, EFFICIENCY_LATENCY_BUDGET_MS) * EFFICIENCY_LATENCY_WEIGHT
    )
    return round_half_up(efficiency)
