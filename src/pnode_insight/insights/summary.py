"""One-paragraph digest of an analytics result."""

from .models import AnalyticsResult


def generate_insights_summary(result: AnalyticsResult) -> str:
    summary = (
        f"Network health score: {result.health_score}/100 "
        f"({result.performance_trend.value}). "
    )

    if result.anomalies:
        summary += f"Detected {len(result.anomalies)} anomalies requiring attention. "

    if result.predicted_issues:
        summary += (
            f"{len(result.predicted_issues)} potential issues identified for proactive monitoring."
        )
    else:
        summary += "No immediate issues predicted."

    return summary
