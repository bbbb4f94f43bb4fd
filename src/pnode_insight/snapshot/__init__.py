"""Node registry snapshots: loading, validation, registry views and counters."""

from .loader import load_snapshot, parse_node, parse_snapshot
from .registry import SORT_KEYS, search_nodes, sort_nodes, top_performers
from .stats import calculate_stats

__all__ = [
    "load_snapshot",
    "parse_snapshot",
    "parse_node",
    "search_nodes",
    "sort_nodes",
    "top_performers",
    "SORT_KEYS",
    "calculate_stats",
]
