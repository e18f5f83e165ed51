from __future__ import annotations

import logging

import pytest
from botocore.exceptions import ClientError

from clustersnap.core import BackupManager
from clustersnap.exceptions import NoIdentifiersSpecifiedError, is_cluster_not_found
from clustersnap.models import SnapshotCreationRecord
from clustersnap.takers import FlakySnapshotTaker, RecordingSnapshotTaker, cluster_not_found_error

CLUSTERS = ("my-cluster-1", "my-cluster-2", "my-cluster-3")


def _records(*cluster_identifiers: str) -> list[SnapshotCreationRecord]:
    return [
        SnapshotCreationRecord(
            cluster_identifier=cluster_identifier,
            snapshot_identifier=f"testing-{cluster_identifier}",
        )
        for cluster_identifier in cluster_identifiers
    ]


def test_trigger_snapshots_requests_each_cluster_in_order(recorder: RecordingSnapshotTaker) -> None:
    manager = BackupManager(recorder, "testing")

    assert manager.trigger_snapshots(*CLUSTERS) is None
    assert recorder.journal == _records("my-cluster-1", "my-cluster-2", "my-cluster-3")


def test_trigger_snapshots_without_identifiers_raises(recorder: RecordingSnapshotTaker) -> None:
    manager = BackupManager(recorder, "testing")

    with pytest.raises(NoIdentifiersSpecifiedError):
        manager.trigger_snapshots()
    assert recorder.journal == []


def test_trigger_snapshots_skips_missing_cluster(caplog: pytest.LogCaptureFixture) -> None:
    # my-cluster-2 no longer exists; the rest of the batch goes ahead
    taker = FlakySnapshotTaker("my-cluster-2", cluster_not_found_error("my-cluster-2"))
    manager = BackupManager(taker, "testing")

    with caplog.at_level(logging.WARNING, logger="clustersnap"):
        manager.trigger_snapshots(*CLUSTERS)

    assert taker.journal == _records("my-cluster-1", "my-cluster-3")
    assert "Not backing up 'my-cluster-2', cluster not found." in caplog.messages


def test_trigger_snapshots_stops_on_other_errors() -> None:
    # a generic failure makes the manager return early with the same error
    failure = RuntimeError("general failure")
    taker = FlakySnapshotTaker("my-cluster-2", failure)
    manager = BackupManager(taker, "testing")

    with pytest.raises(RuntimeError) as excinfo:
        manager.trigger_snapshots(*CLUSTERS)

    assert excinfo.value is failure
    assert taker.journal == _records("my-cluster-1")


def test_trigger_snapshots_stops_on_other_client_errors() -> None:
    throttled = ClientError(
        {"Error": {"Code": "ThrottlingException", "Message": "DBCluster not found"}},
        "CreateDBClusterSnapshot",
    )
    taker = FlakySnapshotTaker("my-cluster-1", throttled)
    manager = BackupManager(taker, "testing")

    with pytest.raises(ClientError) as excinfo:
        manager.trigger_snapshots(*CLUSTERS)

    assert excinfo.value is throttled
    assert taker.journal == []


def test_failing_cluster_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    taker = FlakySnapshotTaker("my-cluster-3", RuntimeError("boom"))
    manager = BackupManager(taker, "testing")

    with caplog.at_level(logging.ERROR, logger="clustersnap"), pytest.raises(RuntimeError):
        manager.trigger_snapshots(*CLUSTERS)

    assert any("my-cluster-3" in message for message in caplog.messages)
    assert taker.journal == _records("my-cluster-1", "my-cluster-2")


def test_duplicate_identifiers_are_requested_each_time(recorder: RecordingSnapshotTaker) -> None:
    manager = BackupManager(recorder, "testing")
    manager.trigger_snapshots("my-cluster-1", "my-cluster-1")
    assert recorder.journal == _records("my-cluster-1", "my-cluster-1")


def test_is_cluster_not_found_checks_error_code_only() -> None:
    assert is_cluster_not_found(cluster_not_found_error("gone"))
    assert not is_cluster_not_found(RuntimeError("DBClusterNotFoundFault"))
    assert not is_cluster_not_found(
        ClientError({"Error": {"Code": "InvalidDBClusterStateFault"}}, "CreateDBClusterSnapshot")
    )
    assert not is_cluster_not_found(ClientError({}, "CreateDBClusterSnapshot"))
