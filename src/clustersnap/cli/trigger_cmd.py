"""Trigger subcommand implementation."""

from __future__ import annotations

import sys

from botocore.exceptions import BotoCoreError, ClientError

from ..config import BackupConfig
from ..core import BackupManager
from ..exceptions import NoIdentifiersSpecifiedError
from ..renderers import journal_to_json, render_journal
from ..takers import RecordingSnapshotTaker, SnapshotTaker, create_rds_client


def run_trigger(cluster_identifiers: list[str], config: BackupConfig, *, as_json: bool) -> int:
    if as_json and not config.dry_run:
        raise ValueError("--json is only supported when --dry-run is provided")

    recorder: RecordingSnapshotTaker | None = None
    taker: SnapshotTaker
    try:
        # no client is built for an empty batch
        if not cluster_identifiers:
            raise NoIdentifiersSpecifiedError()
        if config.dry_run:
            recorder = RecordingSnapshotTaker()
            taker = recorder
        else:
            taker = create_rds_client(region=config.region, profile=config.profile)
        BackupManager(taker, config.resolved_prefix()).trigger_snapshots(*cluster_identifiers)
    except NoIdentifiersSpecifiedError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except (ClientError, BotoCoreError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if recorder is not None:
        if as_json:
            print(journal_to_json(recorder.journal))
        else:
            print(render_journal(recorder.journal, title="Dry run: snapshots that would be requested"))
    return 0
