"""Tests for the pnode-insight command line interface."""

import json

import pytest
from typer.testing import CliRunner

from pnode_insight import __version__
from pnode_insight.cli import app
from pnode_insight.cli.export import default_filename

runner = CliRunner()


@pytest.fixture
def snapshot_file(tmp_path, snapshot_payload, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "nodes.json"
    path.write_text(json.dumps(snapshot_payload))
    return path


class TestMain:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"version {__version__}" in result.stdout


class TestAnalyze:
    def test_rich_output(self, snapshot_file):
        result = runner.invoke(app, ["analyze", str(snapshot_file)])
        assert result.exit_code == 0
        assert "Network Health" in result.stdout

    def test_json_output(self, snapshot_file):
        result = runner.invoke(app, ["analyze", str(snapshot_file), "--json"])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert data["performanceTrend"] in ("improving", "stable", "degrading")
        assert data["summary"].startswith(f"Network health score: {data['healthScore']}/100")
        assert data["rankedInsights"][0]["severity"] == "critical"

    def test_missing_snapshot(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "missing.json")])
        assert result.exit_code == 1

    def test_malformed_snapshot(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        bad = tmp_path / "bad.json"
        bad.write_text('{"not": "nodes"}')
        result = runner.invoke(app, ["analyze", str(bad)])
        assert result.exit_code == 1


class TestNodes:
    def test_search(self, snapshot_file):
        result = runner.invoke(app, ["nodes", str(snapshot_file), "--search", "frankfurt"])
        assert result.exit_code == 0
        assert "pNode Registry (1/3)" in result.stdout

    def test_unknown_sort_key(self, snapshot_file):
        result = runner.invoke(app, ["nodes", str(snapshot_file), "--sort", "colour"])
        assert result.exit_code == 2


class TestExport:
    @pytest.mark.parametrize(
        "fmt,name,start",
        [
            ("csv", "out.csv", '"Identity"'),
            ("json", "out.json", "{"),
            ("markdown", "out.md", "# pNode Network Report"),
        ],
    )
    def test_formats(self, snapshot_file, tmp_path, fmt, name, start):
        target = tmp_path / name
        result = runner.invoke(app, ["export", str(snapshot_file), "-f", fmt, "-o", str(target)])
        assert result.exit_code == 0
        assert "Export saved to:" in result.stdout
        assert target.read_text(encoding="utf-8").startswith(start)

    def test_default_filename(self, snapshot_file, tmp_path):
        result = runner.invoke(app, ["export", str(snapshot_file), "-f", "csv"])
        assert result.exit_code == 0
        assert (tmp_path / "pnode-insight-nodes.csv").exists()

    def test_unknown_format(self, snapshot_file):
        result = runner.invoke(app, ["export", str(snapshot_file), "-f", "xml"])
        assert result.exit_code == 1

    def test_filename_patterns(self):
        assert default_filename("json", "pnode", millis=1700000000000) == (
            "pnode-ai-report-1700000000000.json"
        )
        assert default_filename("markdown", "pnode", millis=5) == "pnode-report-5.md"
        assert default_filename("csv", "pnode") == "pnode-nodes.csv"


class TestWatch:
    def test_single_iteration(self, snapshot_file):
        result = runner.invoke(
            app, ["watch", str(snapshot_file), "--iterations", "1", "--interval", "0"]
        )
        assert result.exit_code == 0
        assert "Network health score:" in result.stdout

    def test_unreadable_snapshot_keeps_running(self, snapshot_file, tmp_path):
        result = runner.invoke(
            app,
            ["watch", str(tmp_path / "gone.json"), "--iterations", "2", "--interval", "0"],
        )
        assert result.exit_code == 0
        assert result.stdout.count("snapshot unavailable") == 2

    def test_log_file_records_each_refresh(self, snapshot_file, tmp_path):
        log_file = tmp_path / "watch.log"
        result = runner.invoke(
            app,
            [
                "watch",
                str(snapshot_file),
                "--iterations",
                "2",
                "--interval",
                "0",
                "--log-file",
                str(log_file),
            ],
        )
        assert result.exit_code == 0
        assert log_file.read_text(encoding="utf-8").count("Refreshed 3 nodes") == 2

    def test_unwritable_log_file(self, snapshot_file, tmp_path):
        result = runner.invoke(
            app,
            [
                "watch",
                str(snapshot_file),
                "--iterations",
                "1",
                "--log-file",
                str(tmp_path / "no-such-dir" / "watch.log"),
            ],
        )
        assert result.exit_code == 1
