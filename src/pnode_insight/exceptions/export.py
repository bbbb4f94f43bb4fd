"""Export exceptions."""

from .base import PNodeInsightError


class ExportError(PNodeInsightError):
    """Raised when an export cannot be produced or written."""

    def __init__(self, fmt: str, reason: str):
        super().__init__(f"Export to {fmt} failed", details={"format": fmt, "reason": reason})
        self.fmt = fmt
        self.reason = reason
