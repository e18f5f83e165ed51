"""clustersnap — on-demand RDS cluster snapshots.

Typical use:
    from clustersnap import BackupManager, create_rds_client, run_prefix
    manager = BackupManager(create_rds_client(region="eu-west-1"), run_prefix())
    manager.trigger_snapshots("orders-db", "billing-db")

Tests swap the RDS client for ``RecordingSnapshotTaker`` or
``FlakySnapshotTaker``.
"""

from __future__ import annotations

from .config import BackupConfig, load_config
from .core import BackupManager
from .exceptions import (
    ClustersnapError,
    ConfigurationError,
    NoIdentifiersSpecifiedError,
    is_cluster_not_found,
)
from .models import SnapshotCreationRecord
from .naming import form_snapshot_identifier, run_prefix
from .takers import (
    FlakySnapshotTaker,
    RecordingSnapshotTaker,
    SnapshotTaker,
    cluster_not_found_error,
    create_rds_client,
)

__all__ = [
    "BackupConfig",
    "BackupManager",
    "ClustersnapError",
    "ConfigurationError",
    "FlakySnapshotTaker",
    "NoIdentifiersSpecifiedError",
    "RecordingSnapshotTaker",
    "SnapshotCreationRecord",
    "SnapshotTaker",
    "cluster_not_found_error",
    "create_rds_client",
    "form_snapshot_identifier",
    "is_cluster_not_found",
    "load_config",
    "run_prefix",
]
