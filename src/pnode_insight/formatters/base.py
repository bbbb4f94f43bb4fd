"""Base formatter interface for pNode Insight output rendering."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Sequence

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..insights import AnalyticsResult, analyze_network_health
from ..models import NetworkStats, NodeRecord
from ..snapshot import calculate_stats


@dataclass(frozen=True)
class ReportContext:
    """Everything an export needs: the snapshot and what was derived from it."""

    nodes: Sequence[NodeRecord]
    result: AnalyticsResult
    stats: NetworkStats
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    top_nodes: int = 5

    @classmethod
    def build(
        cls,
        nodes: Sequence[NodeRecord],
        thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
        generated_at: Optional[datetime] = None,
        top_nodes: int = 5,
    ) -> ReportContext:
        generated_at = generated_at or datetime.now(timezone.utc)
        return cls(
            nodes=nodes,
            result=analyze_network_health(nodes, thresholds, now=generated_at),
            stats=calculate_stats(nodes),
            generated_at=generated_at,
            top_nodes=top_nodes,
        )


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    extension: str = "txt"

    @abstractmethod
    def format(self, context: ReportContext) -> str:
        """Return formatted string representation of the report."""

    def render(self, context: ReportContext) -> None:
        """Print the report to stdout."""
        print(self.format(context))
