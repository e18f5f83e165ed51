from __future__ import annotations

import pytest

from clustersnap.config import BackupConfig
from clustersnap.takers import RecordingSnapshotTaker


@pytest.fixture(autouse=True)
def _clear_clustersnap_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's CLUSTERSNAP_* settings out of the tests."""
    for field in BackupConfig.model_fields:
        monkeypatch.delenv(f"CLUSTERSNAP_{field.upper()}", raising=False)


@pytest.fixture
def recorder() -> RecordingSnapshotTaker:
    return RecordingSnapshotTaker()
