"""Record types produced by observing snapshot takers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SnapshotCreationRecord(BaseModel):
    """One requested snapshot: which cluster, under which name."""

    model_config = ConfigDict(strict=True, frozen=True)

    cluster_identifier: str
    snapshot_identifier: str
