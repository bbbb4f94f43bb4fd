"""Data models for the health analytics engine."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class InsightType(str, Enum):
    ANOMALY = "anomaly"
    PREDICTION = "prediction"
    OPTIMIZATION = "optimization"
    RECOMMENDATION = "recommendation"


class Severity(str, Enum):
    """Insight severity. ``rank`` orders critical first."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return SEVERITY_RANK[self]


SEVERITY_RANK: dict[Severity, int] = {
    Severity.CRITICAL: 0,
    Severity.HIGH: 1,
    Severity.MEDIUM: 2,
    Severity.LOW: 3,
}


class Trend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DEGRADING = "degrading"


@dataclass(frozen=True)
class Insight:
    type: InsightType
    severity: Severity
    title: str  # "High Latency Detected"
    description: str  # embeds the computed statistics
    impact: str  # fixed statement for the rule that fired
    timestamp: datetime  # informational only
    action: Optional[str] = None

    def content(self) -> tuple:
        """Everything except the timestamp, for comparing two analyses."""
        return (
            self.type,
            self.severity,
            self.title,
            self.description,
            self.impact,
            self.action,
        )

    def to_dict(self) -> dict:
        data = {
            "type": self.type.value,
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
            "impact": self.impact,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.action is not None:
            data["action"] = self.action
        return data


@dataclass(frozen=True)
class AnalyticsResult:
    health_score: int
    performance_trend: Trend
    network_efficiency: int
    anomalies: list[Insight] = field(default_factory=list)
    predicted_issues: list[Insight] = field(default_factory=list)
    optimization_opportunities: list[Insight] = field(default_factory=list)

    @property
    def all_insights(self) -> list[Insight]:
        """Anomalies, then predictions, then optimizations; not severity sorted."""
        return [*self.anomalies, *self.predicted_issues, *self.optimization_opportunities]

    def to_dict(self) -> dict:
        return {
            "healthScore": self.health_score,
            "performanceTrend": self.performance_trend.value,
            "networkEfficiency": self.network_efficiency,
            "anomalies": [i.to_dict() for i in self.anomalies],
            "predictedIssues": [i.to_dict() for i in self.predicted_issues],
            "optimizationOpportunities": [
                i.to_dict() for i in self.optimization_opportunities
            ],
        }
