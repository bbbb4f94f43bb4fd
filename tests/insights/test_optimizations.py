"""Tests for the optimization finder."""

from pnode_insight.insights import InsightType, Severity, find_optimizations
from pnode_insight.insights.finders import geographic_diversity, latency_optimization


class TestLatencyOptimization:
    def test_fires_above_100ms(self, make_node):
        nodes = [make_node(latency=100.0), make_node(latency=201.0)]

        insight = latency_optimization(nodes)

        assert insight.type is InsightType.OPTIMIZATION
        assert insight.severity is Severity.MEDIUM
        assert insight.description == "Network average latency at 151ms, could be improved"

    def test_exactly_100ms(self, make_node):
        assert latency_optimization([make_node(latency=100.0)]) is None


class TestGeographicDiversity:
    def test_two_regions(self, make_node):
        nodes = [
            make_node(location="Frankfurt"),
            make_node(location="Virginia"),
            make_node(location=None),
            make_node(location=""),
        ]

        insight = geographic_diversity(nodes)

        assert insight.severity is Severity.LOW
        assert insight.description == "Network concentrated in 2 regions"

    def test_no_reported_locations(self, make_node):
        insight = geographic_diversity([make_node(location=None)])
        assert insight.description == "Network concentrated in 0 regions"

    def test_three_regions(self, healthy_fleet):
        assert geographic_diversity(healthy_fleet) is None


class TestFindOptimizations:
    def test_empty_snapshot(self):
        assert find_optimizations([]) == []

    def test_order(self, make_node):
        titles = [i.title for i in find_optimizations([make_node(latency=250.0)])]
        assert titles == ["Latency Optimization Opportunity", "Geographic Diversity"]
