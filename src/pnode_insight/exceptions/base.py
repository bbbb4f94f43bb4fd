"""Base exception for pNode Insight."""

from typing import Any, Mapping, Optional


class PNodeInsightError(Exception):
    """Base exception for all pNode Insight errors.

    ``details`` values are stored as strings and entries whose value is
    ``None`` are dropped, so subclasses can pass paths, indices and raw
    snapshot values straight through.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {k: str(v) for k, v in (details or {}).items() if v is not None}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({details_str})"
