"""Snapshot takers."""

from .base import SnapshotTaker
from .memory import (
    FlakySnapshotTaker,
    RecordingSnapshotTaker,
    cluster_not_found_error,
)
from .rds import create_rds_client

__all__ = [
    "FlakySnapshotTaker",
    "RecordingSnapshotTaker",
    "SnapshotTaker",
    "cluster_not_found_error",
    "create_rds_client",
]
