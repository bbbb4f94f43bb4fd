"""Detection rules: one module per insight category."""

from .anomalies import (
    detect_anomalies,
    high_latency_anomaly,
    unstable_nodes_anomaly,
    version_fragmentation_anomaly,
)
from .optimizations import find_optimizations, geographic_diversity, latency_optimization
from .predictions import availability_risk, predict_issues, storage_capacity_risk

__all__ = [
    "detect_anomalies",
    "high_latency_anomaly",
    "unstable_nodes_anomaly",
    "version_fragmentation_anomaly",
    "predict_issues",
    "availability_risk",
    "storage_capacity_risk",
    "find_optimizations",
    "latency_optimization",
    "geographic_diversity",
]
