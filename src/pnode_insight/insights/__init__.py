"""Health analytics: score, trend, efficiency and ranked insights per snapshot."""

from .engine import AnalyticsEngine, analyze_network_health
from .finders import detect_anomalies, find_optimizations, predict_issues
from .models import SEVERITY_RANK, AnalyticsResult, Insight, InsightType, Severity, Trend
from .ranking import rank_insights, rank_result
from .scoring import classify_trend, compute_efficiency, compute_health_score
from .summary import generate_insights_summary

__all__ = [
    "AnalyticsEngine",
    "analyze_network_health",
    "compute_health_score",
    "classify_trend",
    "compute_efficiency",
    "detect_anomalies",
    "predict_issues",
    "find_optimizations",
    "rank_insights",
    "rank_result",
    "generate_insights_summary",
    "AnalyticsResult",
    "Insight",
    "InsightType",
    "Severity",
    "Trend",
    "SEVERITY_RANK",
]
