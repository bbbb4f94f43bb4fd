"""Exception hierarchy for pNode Insight."""

from .base import PNodeInsightError
from .config import ConfigurationError, InvalidConfigError
from .export import ExportError
from .snapshot import (
    InvalidNodeRecordError,
    SnapshotError,
    SnapshotFileError,
    SnapshotFormatError,
)

__all__ = [
    "PNodeInsightError",
    "ConfigurationError",
    "InvalidConfigError",
    "SnapshotError",
    "SnapshotFileError",
    "SnapshotFormatError",
    "InvalidNodeRecordError",
    "ExportError",
]
