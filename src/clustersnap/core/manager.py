"""BackupManager — triggers cluster snapshots through a SnapshotTaker."""

from __future__ import annotations

import logging

from ..exceptions import NoIdentifiersSpecifiedError, is_cluster_not_found
from ..naming import form_snapshot_identifier
from ..takers import SnapshotTaker

logger = logging.getLogger(__name__)


class BackupManager:
    """Owns a snapshot taker and a naming prefix.

    Error-handling contract
    ----------------------
    - An empty batch raises ``NoIdentifiersSpecifiedError`` before any request.
    - A cluster that RDS reports as missing is logged and skipped.
    - Any other exception stops the batch and propagates unchanged; clusters
      after the failing one are never requested. Requests already issued are
      not undone.
    """

    def __init__(self, taker: SnapshotTaker, prefix: str) -> None:
        self.taker = taker
        self.prefix = prefix

    def form_snapshot_identifier(self, cluster_identifier: str) -> str:
        return form_snapshot_identifier(self.prefix, cluster_identifier)

    def trigger_snapshots(self, *cluster_identifiers: str) -> None:
        if not cluster_identifiers:
            raise NoIdentifiersSpecifiedError()

        for cluster_identifier in cluster_identifiers:
            snapshot_identifier = self.form_snapshot_identifier(cluster_identifier)
            logger.info(
                "Requesting snapshot '%s' of cluster '%s'.",
                snapshot_identifier,
                cluster_identifier,
            )
            try:
                self.taker.create_db_cluster_snapshot(
                    DBClusterIdentifier=cluster_identifier,
                    DBClusterSnapshotIdentifier=snapshot_identifier,
                )
            except Exception as exc:
                if is_cluster_not_found(exc):
                    logger.warning("Not backing up '%s', cluster not found.", cluster_identifier)
                    continue
                logger.error("Snapshot of cluster '%s' failed: %s", cluster_identifier, exc)
                raise
