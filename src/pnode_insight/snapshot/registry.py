"""Search and ordering helpers for the node registry view."""

from __future__ import annotations

from typing import Sequence

from ..models import NodeRecord

SORT_KEYS = (
    "identity",
    "status",
    "latency",
    "uptime",
    "disk_space",
    "version",
    "location",
)


def search_nodes(nodes: Sequence[NodeRecord], term: str) -> list[NodeRecord]:
    """Case-insensitive substring match on identity, version or location."""
    if not term:
        return list(nodes)

    needle = term.lower()
    return [
        n
        for n in nodes
        if needle in n.identity.lower()
        or (n.version is not None and needle in n.version.lower())
        or (n.location is not None and needle in n.location.lower())
    ]


def sort_nodes(
    nodes: Sequence[NodeRecord], key: str = "latency", descending: bool = False
) -> list[NodeRecord]:
    """Stable sort by a record field. Missing values sort before present ones.

    Raises:
        ValueError: If key is not a sortable field
    """
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {key!r}. Choose from: {', '.join(SORT_KEYS)}")

    def sort_value(node: NodeRecord) -> tuple:
        value = getattr(node, key)
        if value is None:
            return (0, 0)
        if key == "status":
            value = value.value
        return (1, value)

    return sorted(nodes, key=sort_value, reverse=descending)


def top_performers(nodes: Sequence[NodeRecord], limit: int = 5) -> list[NodeRecord]:
    """Lowest-latency nodes first; the input sequence is left untouched."""
    return sorted(nodes, key=lambda n: n.latency)[:limit]
