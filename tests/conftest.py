"""Shared test fixtures for pNode Insight tests."""

from datetime import datetime, timezone

import pytest

from pnode_insight.models import NodeRecord, NodeStatus

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _make_node(
    identity="node",
    status=NodeStatus.ACTIVE,
    latency=50.0,
    uptime=99.0,
    disk_space=100.0,
    version="1.0.0",
    location="Frankfurt",
    **extra,
):
    """Build a NodeRecord with healthy defaults."""
    return NodeRecord(
        identity=identity,
        status=status,
        latency=latency,
        uptime=uptime,
        disk_space=disk_space,
        version=version,
        location=location,
        **extra,
    )


@pytest.fixture
def make_node():
    """Factory for NodeRecord instances."""
    return _make_node


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def healthy_fleet():
    """Ten well-behaved nodes across three regions."""
    regions = ["Frankfurt", "Singapore", "Virginia"]
    return [
        _make_node(identity=f"node-{i}", latency=40.0, uptime=99.5, location=regions[i % 3])
        for i in range(10)
    ]


@pytest.fixture
def scenario_fleet():
    """9 Active / 1 Offline, average latency 50 ms, average uptime 98%."""
    nodes = [_make_node(identity=f"node-{i}", latency=50.0, uptime=98.0) for i in range(9)]
    nodes.append(
        _make_node(identity="node-9", status=NodeStatus.OFFLINE, latency=50.0, uptime=98.0)
    )
    return nodes


@pytest.fixture
def snapshot_payload():
    """Registry payload using wire field names."""
    return [
        {
            "identityPubkey": "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU",
            "gossipAddr": "10.0.0.1:8001",
            "rpcAddr": "10.0.0.1:8899",
            "version": "1.2.0",
            "status": "Active",
            "latency": 42,
            "location": "Frankfurt",
            "diskSpace": 120.5,
            "uptime": 99.91,
        },
        {
            "identityPubkey": "9aE476sH92Vz7DMPyq5WLPkrKWivxeuTKEFKd2sZZcde",
            "gossipAddr": "10.0.0.2:8001",
            "version": "1.1.9",
            "status": "Delinquent",
            "latency": 180,
            "location": "Singapore",
        },
        {
            "identityPubkey": "Bv1Dq2mX5yKqL3rN8sT4uW6zA7cE9fH2jM5pR8tV1xY3",
            "gossipAddr": "10.0.0.3:8001",
            "status": "Offline",
            "latency": 0,
        },
    ]
