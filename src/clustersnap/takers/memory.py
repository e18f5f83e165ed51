"""In-memory snapshot takers. Good for tests and dry runs."""

from __future__ import annotations

from typing import Any

from botocore.exceptions import ClientError

from ..exceptions import CLUSTER_NOT_FOUND_CODE
from ..models import SnapshotCreationRecord

_OPERATION_NAME = "CreateDBClusterSnapshot"


class RecordingSnapshotTaker:
    """Journals every request and answers with a synthetic RDS response."""

    def __init__(self) -> None:
        self.journal: list[SnapshotCreationRecord] = []

    def create_db_cluster_snapshot(
        self,
        *,
        DBClusterIdentifier: str,
        DBClusterSnapshotIdentifier: str,
        **kwargs: Any,
    ) -> dict[str, Any]:
        self.journal.append(
            SnapshotCreationRecord(
                cluster_identifier=DBClusterIdentifier,
                snapshot_identifier=DBClusterSnapshotIdentifier,
            )
        )
        return {
            "DBClusterSnapshot": {
                "DBClusterIdentifier": DBClusterIdentifier,
                "DBClusterSnapshotIdentifier": DBClusterSnapshotIdentifier,
                "Status": "creating",
            }
        }


class FlakySnapshotTaker:
    """Fails for one cluster and forwards every other request to a recorder.

    The failing cluster never reaches the recorder, so its journal holds only
    the requests that went through.
    """

    def __init__(
        self,
        offending_cluster_id: str,
        error: BaseException,
        recorder: RecordingSnapshotTaker | None = None,
    ) -> None:
        self.offending_cluster_id = offending_cluster_id
        self.error = error
        self.recorder = recorder or RecordingSnapshotTaker()

    @property
    def journal(self) -> list[SnapshotCreationRecord]:
        return self.recorder.journal

    def create_db_cluster_snapshot(
        self,
        *,
        DBClusterIdentifier: str,
        DBClusterSnapshotIdentifier: str,
        **kwargs: Any,
    ) -> dict[str, Any]:
        if DBClusterIdentifier == self.offending_cluster_id:
            raise self.error
        return self.recorder.create_db_cluster_snapshot(
            DBClusterIdentifier=DBClusterIdentifier,
            DBClusterSnapshotIdentifier=DBClusterSnapshotIdentifier,
            **kwargs,
        )


def cluster_not_found_error(cluster_identifier: str) -> ClientError:
    """Build the error RDS raises for a cluster that does not exist."""
    return ClientError(
        {
            "Error": {
                "Code": CLUSTER_NOT_FOUND_CODE,
                "Message": f"DBCluster {cluster_identifier} not found.",
            },
            "ResponseMetadata": {"HTTPStatusCode": 404},
        },
        _OPERATION_NAME,
    )
