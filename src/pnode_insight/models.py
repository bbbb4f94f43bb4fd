"""Data models for pNode telemetry snapshots."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class NodeStatus(str, Enum):
    """Registry status of a pNode."""

    ACTIVE = "Active"
    DELINQUENT = "Delinquent"
    OFFLINE = "Offline"


@dataclass(frozen=True)
class NodeRecord:
    """Telemetry for one pNode at one point in time.

    Optional metrics are ``None`` when the node has not reported them.
    The analytics rules decide how a missing value is treated; the record
    itself never substitutes defaults.
    """

    identity: str
    status: NodeStatus
    latency: float  # milliseconds
    uptime: Optional[float] = None  # percentage, 0-100
    disk_space: Optional[float] = None  # terabytes
    version: Optional[str] = None
    location: Optional[str] = None
    gossip_addr: Optional[str] = None
    rpc_addr: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status is NodeStatus.ACTIVE

    def to_dict(self) -> dict:
        """Serialize using the registry's wire names."""
        return {
            "identityPubkey": self.identity,
            "gossipAddr": self.gossip_addr,
            "rpcAddr": self.rpc_addr,
            "version": self.version,
            "status": self.status.value,
            "latency": self.latency,
            "location": self.location,
            "diskSpace": self.disk_space,
            "uptime": self.uptime,
        }


@dataclass(frozen=True)
class NetworkStats:
    """Headline counters shown above the node registry."""

    total_nodes: int
    active_nodes: int
    total_storage: float
    avg_latency: float

    def to_dict(self) -> dict:
        return {
            "totalNodes": self.total_nodes,
            "activeNodes": self.active_nodes,
            "totalStorage": self.total_storage,
            "avgLatency": self.avg_latency,
        }
