"""Headline network counters."""

from __future__ import annotations

from typing import Sequence

from ..math import Statistics
from ..models import NetworkStats, NodeRecord


def calculate_stats(nodes: Sequence[NodeRecord]) -> NetworkStats:
    return NetworkStats(
        total_nodes=len(nodes),
        active_nodes=sum(1 for n in nodes if n.is_active),
        total_storage=float(sum(n.disk_space or 0.0 for n in nodes)),
        avg_latency=Statistics.mean([n.latency for n in nodes]),
    )
