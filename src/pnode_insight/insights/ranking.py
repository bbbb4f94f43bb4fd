"""Severity ranking of insights for presentation."""

from __future__ import annotations

from typing import Iterable

from .models import SEVERITY_RANK, AnalyticsResult, Insight


def rank_insights(*groups: Iterable[Insight]) -> list[Insight]:
    """Concatenate insight groups in order, then stable-sort by severity.

    Critical sorts first, low last. Insights of equal severity keep the
    order in which their groups were passed.
    """
    merged = [insight for group in groups for insight in group]
    return sorted(merged, key=lambda i: SEVERITY_RANK[i.severity])


def rank_result(result: AnalyticsResult) -> list[Insight]:
    """Ranked view of anomalies ++ predicted issues ++ optimizations."""
    return rank_insights(
        result.anomalies, result.predicted_issues, result.optimization_opportunities
    )
