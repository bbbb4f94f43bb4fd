"""Descriptive statistics used by the health analytics rules."""

import math
from typing import Iterable, Sequence

import numpy as np


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves rounded up.

    Differs from builtin ``round`` (banker's rounding): ``round_half_up(2.5) == 3``.
    """
    return int(math.floor(x + 0.5))


class Statistics:
    """Statistical helpers that stay total over empty input."""

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        """Compute arithmetic mean; 0.0 for an empty sequence."""
        if len(values) == 0:
            return 0.0
        return float(np.mean(np.asarray(values, dtype=float)))

    @staticmethod
    def ratio(count: int, total: int) -> float:
        """count / total, with an empty denominator treated as 1."""
        return count / max(total, 1)

    @staticmethod
    def distinct(values: Iterable[object]) -> list:
        """Distinct truthy values in first-seen order."""
        seen: dict = {}
        for v in values:
            if v:
                seen.setdefault(v, None)
        return list(seen)
