"""Rich-based rendering of snapshot journals."""

from __future__ import annotations

import json
from collections.abc import Sequence
from io import StringIO

from rich.console import Console
from rich.table import Table

from ..models import SnapshotCreationRecord


def render_journal(
    journal: Sequence[SnapshotCreationRecord],
    *,
    title: str = "Requested snapshots",
) -> str:
    table = Table()
    table.add_column("#", justify="right")
    table.add_column("Cluster", no_wrap=True)
    table.add_column("Snapshot", no_wrap=True)
    for index, record in enumerate(journal, start=1):
        table.add_row(str(index), record.cluster_identifier, record.snapshot_identifier)

    console = Console(record=True, width=160, markup=False, file=StringIO())
    console.print(f"{title} ({len(journal)})", soft_wrap=True)
    console.print(table)
    return console.export_text()


def journal_to_json(journal: Sequence[SnapshotCreationRecord], *, indent: int | None = None) -> str:
    return json.dumps([record.model_dump() for record in journal], indent=indent)
