"""Numeric helpers for snapshot analytics."""

from .statistics import Statistics, round_half_up

__all__ = ["Statistics", "round_half_up"]
