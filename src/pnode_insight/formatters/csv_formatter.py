"""CSV export of the node registry."""

import csv
import io

from ..models import NodeRecord
from .base import BaseFormatter, ReportContext

HEADERS = [
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


def _number(value: float) -> str:
    return str(int(value)) if value == int(value) else str(value)


def node_row(node: NodeRecord) -> list[str]:
    return [
        node.identity,
        node.gossip_addr or "N/A",
        node.rpc_addr or "N/A",
        node.version or "Unknown",
        node.status.value,
        _number(node.latency),
        node.location or "Unknown",
        _number(node.disk_space) if node.disk_space is not None else "N/A",
        f"{node.uptime:.2f}" if node.uptime is not None else "N/A",
    ]


class CsvFormatter(BaseFormatter):
    """One quoted row per node."""

    extension = "csv"

    def render(self, context: ReportContext) -> None:
        print(self.format(context), end="")

    def format(self, context: ReportContext) -> str:
        output = io.StringIO()
        writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(HEADERS)
        for node in context.nodes:
            writer.writerow(node_row(node))
        return output.getvalue()
