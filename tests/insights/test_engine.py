"""Tests for the analytics orchestrator."""

from datetime import timedelta

from pnode_insight import AnalyticsEngine, analyze_network_health
from pnode_insight.config import ThresholdConfig
from pnode_insight.insights import Severity, Trend
from pnode_insight.models import NodeStatus


class TestEmptySnapshot:
    def test_everything_degrades_to_zero(self):
        result = analyze_network_health([])

        assert result.health_score == 0
        assert result.performance_trend is Trend.DEGRADING
        assert result.network_efficiency == 0
        assert result.anomalies == []
        assert result.predicted_issues == []
        assert result.optimization_opportunities == []


class TestScenarios:
    def test_documented_scenario(self, scenario_fleet, now):
        result = analyze_network_health(scenario_fleet, now=now)

        assert result.health_score == 88
        assert result.performance_trend is Trend.IMPROVING
        assert result.network_efficiency == 78
        assert result.anomalies == []
        assert result.predicted_issues == []
        # every node reports the same region
        assert [i.title for i in result.optimization_opportunities] == ["Geographic Diversity"]

    def test_healthy_fleet_has_no_insights(self, healthy_fleet):
        result = analyze_network_health(healthy_fleet)

        assert result.health_score == 94
        assert result.all_insights == []

    def test_failing_fleet(self, make_node, now):
        nodes = [make_node(identity=f"a{i}", uptime=80.0) for i in range(3)]
        nodes += [make_node(identity=f"o{i}", status=NodeStatus.OFFLINE) for i in range(2)]

        result = analyze_network_health(nodes, now=now)

        assert result.predicted_issues[0].severity is Severity.CRITICAL
        assert result.anomalies[0].title == "Unstable Nodes Detected"
        assert result.performance_trend is Trend.STABLE

    def test_duplicate_identities_counted_positionally(self, make_node):
        nodes = [make_node(identity="same", status=NodeStatus.OFFLINE)] * 2 + [make_node(identity="same")]
        result = analyze_network_health(nodes)
        assert result.predicted_issues[0].description.startswith("Active node ratio at 33%")


class TestIdempotence:
    def test_same_snapshot_same_content(self, scenario_fleet, now):
        first = analyze_network_health(scenario_fleet, now=now)
        second = analyze_network_health(scenario_fleet, now=now + timedelta(seconds=30))

        assert first.health_score == second.health_score
        assert first.performance_trend is second.performance_trend
        assert first.network_efficiency == second.network_efficiency
        assert [i.content() for i in first.all_insights] == [
            i.content() for i in second.all_insights
        ]

    def test_one_timestamp_per_analysis(self, make_node):
        nodes = [make_node(latency=500.0, disk_space=1.0, status=NodeStatus.OFFLINE)]
        result = analyze_network_health(nodes)
        assert len({i.timestamp for i in result.all_insights}) == 1


class TestAnalyticsEngine:
    def test_uses_configured_thresholds(self, healthy_fleet):
        engine = AnalyticsEngine(ThresholdConfig(min_regions=4))
        result = engine.analyze(healthy_fleet)
        assert [i.title for i in result.optimization_opportunities] == ["Geographic Diversity"]

    def test_to_dict(self, scenario_fleet, now):
        data = AnalyticsEngine().analyze(scenario_fleet, now=now).to_dict()

        assert data["healthScore"] == 88
        assert data["performanceTrend"] == "improving"
        assert data["networkEfficiency"] == 78
        assert data["optimizationOpportunities"][0]["timestamp"] == now.isoformat()
