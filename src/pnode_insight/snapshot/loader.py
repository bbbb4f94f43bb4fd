"""Decode and validate node registry snapshots.

The analytics engine computes through whatever it is given; rejecting
malformed telemetry is this module's job.
"""

from __future__ import annotations

import json
import math
from numbers import Real
from pathlib import Path
from typing import Any, Optional, Union

from ..exceptions import InvalidNodeRecordError, SnapshotFileError, SnapshotFormatError
from ..logging_config import get_logger
from ..models import NodeRecord, NodeStatus

logger = get_logger(__name__)

# wire name -> NodeRecord field; snake_case names are accepted as-is
FIELD_ALIASES: dict[str, str] = {
    "identityPubkey": "identity",
    "identity_pubkey": "identity",
    "gossipAddr": "gossip_addr",
    "rpcAddr": "rpc_addr",
    "diskSpace": "disk_space",
}

_STATUS_LOOKUP = {status.value.lower(): status for status in NodeStatus}


def load_snapshot(path: Union[str, Path]) -> list[NodeRecord]:
    """Read a JSON snapshot file into node records."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotFileError(path, e.strerror or str(e))

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotFormatError(f"invalid JSON at line {e.lineno}: {e.msg}")

    nodes = parse_snapshot(data)
    logger.info("Loaded %d nodes from %s", len(nodes), path)
    return nodes


def parse_snapshot(data: Any) -> list[NodeRecord]:
    """Convert a decoded payload (list, or object with ``nodes``) into records."""
    if isinstance(data, dict):
        if "nodes" not in data:
            raise SnapshotFormatError("object payload has no 'nodes' key")
        data = data["nodes"]

    if not isinstance(data, list):
        raise SnapshotFormatError(f"expected a list of nodes, got {type(data).__name__}")

    return [parse_node(raw, index) for index, raw in enumerate(data)]


def parse_node(raw: Any, index: int = 0) -> NodeRecord:
    if not isinstance(raw, dict):
        raise InvalidNodeRecordError(index, "*", f"expected an object, got {type(raw).__name__}")

    fields = {FIELD_ALIASES.get(key, key): value for key, value in raw.items()}

    identity = fields.get("identity")
    if not isinstance(identity, str) or not identity.strip():
        raise InvalidNodeRecordError(index, "identity", "must be a non-empty string")

    return NodeRecord(
        identity=identity,
        status=_parse_status(fields.get("status"), index),
        latency=_parse_number(fields.get("latency"), index, "latency", required=True),
        uptime=_parse_number(fields.get("uptime"), index, "uptime", upper=100.0),
        disk_space=_parse_number(fields.get("disk_space"), index, "disk_space"),
        version=_parse_text(fields.get("version"), index, "version"),
        location=_parse_text(fields.get("location"), index, "location"),
        gossip_addr=_parse_text(fields.get("gossip_addr"), index, "gossip_addr"),
        rpc_addr=_parse_text(fields.get("rpc_addr"), index, "rpc_addr"),
    )


def _parse_status(value: Any, index: int) -> NodeStatus:
    if isinstance(value, NodeStatus):
        return value
    if isinstance(value, str):
        status = _STATUS_LOOKUP.get(value.strip().lower())
        if status is not None:
            return status
    raise InvalidNodeRecordError(
        index, "status", f"expected one of Active, Delinquent, Offline; got {value!r}"
    )


def _parse_number(
    value: Any,
    index: int,
    field: str,
    required: bool = False,
    upper: Optional[float] = None,
) -> Optional[float]:
    if value is None:
        if required:
            raise InvalidNodeRecordError(index, field, "is required")
        return None

    # bool is a Real subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidNodeRecordError(index, field, f"expected a number, got {value!r}")

    number = float(value)
    if not math.isfinite(number):
        raise InvalidNodeRecordError(index, field, "must be finite")
    if number < 0:
        raise InvalidNodeRecordError(index, field, "must be non-negative")
    if upper is not None and number > upper:
        raise InvalidNodeRecordError(index, field, f"must be at most {upper:g}")
    return number


def _parse_text(value: Any, index: int, field: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidNodeRecordError(index, field, f"expected a string, got {value!r}")
    return value or None
