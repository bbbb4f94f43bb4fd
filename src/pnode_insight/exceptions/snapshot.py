"""Snapshot exceptions: unreadable files, malformed payloads, invalid node records."""

from pathlib import Path

from .base import PNodeInsightError


class SnapshotError(PNodeInsightError):
    """Base class for snapshot loading errors."""

    pass


class SnapshotFileError(SnapshotError):
    """Raised when a snapshot file cannot be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot read snapshot: {path}",
            details={"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason


class SnapshotFormatError(SnapshotError):
    """Raised when a snapshot payload is not a list of node objects."""

    def __init__(self, reason: str):
        super().__init__(f"Malformed snapshot: {reason}", details={"reason": reason})
        self.reason = reason


class InvalidNodeRecordError(SnapshotError):
    """Raised when a single node record fails validation."""

    def __init__(self, index: int, field: str, reason: str):
        super().__init__(
            f"Invalid node record at index {index}",
            details={"index": index, "field": field, "reason": reason},
        )
        self.index = index
        self.field = field
        self.reason = reason
