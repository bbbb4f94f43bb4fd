"""Tests for the formatters package."""

import csv
import io
import json

import pytest

from pnode_insight.formatters import (
    CsvFormatter,
    JsonFormatter,
    MarkdownFormatter,
    ReportContext,
    RichFormatter,
    get_formatter,
)
from pnode_insight.snapshot import parse_snapshot


@pytest.fixture
def context(snapshot_payload, now):
    return ReportContext.build(parse_snapshot(snapshot_payload), generated_at=now)


class TestGetFormatter:
    def test_known_formatters(self):
        for name in ("rich", "json", "csv", "markdown"):
            assert get_formatter(name) is not None

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestReportContext:
    def test_build_runs_engine(self, context):
        # 1 of 3 active
        assert context.result.predicted_issues[0].severity.value == "critical"
        assert context.stats.total_nodes == 3
        assert context.result.anomalies[0].timestamp == context.generated_at


class TestCsvFormatter:
    def test_header_and_rows(self, context):
        rows = list(csv.reader(io.StringIO(CsvFormatter().format(context))))

        assert rows[0] == [
            "Identity",
            "Gossip Address",
            "RPC Address",
            "Version",
            "Status",
            "Latency (ms)",
            "Location",
            "Disk Space (TB)",
            "Uptime (%)",
        ]
        assert len(rows) == 4
        assert rows[1][5:] == ["42", "Frankfurt", "120.5", "99.91"]

    def test_missing_values(self, context):
        rows = list(csv.reader(io.StringIO(CsvFormatter().format(context))))
        offline = rows[3]
        assert offline[2] == "N/A"
        assert offline[3] == "Unknown"
        assert offline[4] == "Offline"
        assert offline[6:] == ["Unknown", "N/A", "N/A"]

    def test_every_cell_quoted(self, context):
        first_line = CsvFormatter().format(context).splitlines()[0]
        assert first_line.startswith('"Identity","Gossip Address"')

    def test_uptime_two_decimals(self, make_node, now):
        ctx = ReportContext.build([make_node(uptime=97.0)], generated_at=now)
        rows = list(csv.reader(io.StringIO(CsvFormatter().format(ctx))))
        assert rows[1][-1] == "97.00"


class TestJsonFormatter:
    def test_report_structure(self, context, now):
        data = json.loads(JsonFormatter().format(context))

        assert data["generatedAt"] == now.isoformat()
        assert data["networkStats"]["totalNodes"] == 3
        analytics = data["aiAnalytics"]
        assert analytics["healthScore"] == context.result.health_score
        assert analytics["anomaliesCount"] == len(context.result.anomalies)
        assert len(analytics["insights"]) == len(context.result.all_insights)
        assert data["nodesSummary"]["byStatus"] == {"active": 1, "delinquent": 1, "offline": 1}

    def test_average_uptime_treats_missing_as_zero(self, context):
        data = json.loads(JsonFormatter().format(context))
        assert data["nodesSummary"]["averageMetrics"]["uptime"] == pytest.approx(99.91 / 3)


class TestMarkdownFormatter:
    def test_sections(self, context):
        text = MarkdownFormatter().format(context)

        assert text.startswith("# pNode Network Report\n")
        assert "- **Active Nodes**: 1 (33%)" in text
        assert f"- **Health Score**: {context.result.health_score}/100" in text
        assert "### Predicted Issues (" in text
        assert "- **Network Availability Risk** [critical]:" in text

    def test_top_performers_by_latency(self, context):
        text = MarkdownFormatter().format(context)
        top = text.split("## Top Performing Nodes\n")[1].splitlines()

        assert top[0].startswith("1. Bv1Dq2mX") and top[0].endswith("- 0ms latency")
        assert top[1].endswith("- 42ms latency")

    def test_empty_snapshot(self, now):
        text = MarkdownFormatter().format(ReportContext.build([], generated_at=now))
        assert "- **Active Nodes**: 0 (0%)" in text
        assert "### Anomalies Detected (0)" in text


class TestRichFormatter:
    def test_format_returns_empty_string(self, context, capsys):
        assert RichFormatter().format(context) == ""
        out = capsys.readouterr().out
        assert "Network Health" in out
        assert "critical" in out

    def test_no_insights(self, healthy_fleet, now, capsys):
        RichFormatter().render(ReportContext.build(healthy_fleet, generated_at=now))
        assert "No insights" in capsys.readouterr().out
