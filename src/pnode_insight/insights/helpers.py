"""Snapshot-wide aggregates shared by the scoring and detection rules.

Missing optional metrics count as zero: a node that has not reported
uptime contributes 0% uptime, one without disk space contributes 0 TB.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..math import Statistics
from ..models import NodeRecord


@dataclass(frozen=True)
class SnapshotAggregates:
    node_count: int
    active_count: int
    active_ratio: float
    avg_latency: float
    avg_uptime: float
    avg_storage: float
    versions: tuple[str, ...]
    locations: tuple[str, ...]

    @classmethod
    def from_nodes(cls, nodes: Sequence[NodeRecord]) -> SnapshotAggregates:
        n = len(nodes)
        latencies = np.fromiter((node.latency for node in nodes), dtype=float, count=n)
        uptimes = np.fromiter((node.uptime or 0.0 for node in nodes), dtype=float, count=n)
        storage = np.fromiter((node.disk_space or 0.0 for node in nodes), dtype=float, count=n)
        active_count = sum(1 for node in nodes if node.is_active)

        return cls(
            node_count=n,
            active_count=active_count,
            active_ratio=Statistics.ratio(active_count, n),
            avg_latency=Statistics.mean(latencies),
            avg_uptime=Statistics.mean(uptimes),
            avg_storage=Statistics.mean(storage),
            versions=tuple(Statistics.distinct(node.version for node in nodes)),
            locations=tuple(Statistics.distinct(node.location for node in nodes)),
        )


def resolve_aggregates(
    nodes: Sequence[NodeRecord], aggregates: SnapshotAggregates | None
) -> SnapshotAggregates:
    """Reuse precomputed aggregates when the orchestrator supplies them."""
    if aggregates is not None:
        return aggregates
    return SnapshotAggregates.from_nodes(nodes)
