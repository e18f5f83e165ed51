"""Snapshot taker abstraction."""

from __future__ import annotations

from typing import Any, Protocol


class SnapshotTaker(Protocol):
    """Anything that can request a DB cluster snapshot.

    Mirrors the single method of the boto3 RDS client that BackupManager
    calls, so an RDS client satisfies it without an adapter.
    """

    def create_db_cluster_snapshot(
        self,
        *,
        DBClusterIdentifier: str,
        DBClusterSnapshotIdentifier: str,
        **kwargs: Any,
    ) -> dict[str, Any]: ...
