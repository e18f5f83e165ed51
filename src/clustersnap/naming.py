"""Snapshot identifier derivation."""

from __future__ import annotations

import time

SEPARATOR = "-"
SNAPSHOT_IDENTIFIER_MAX_LENGTH = 64


def form_snapshot_identifier(prefix: str, cluster_identifier: str) -> str:
    """Join ``prefix`` and ``cluster_identifier`` into a snapshot identifier.

    The result is cut to ``SNAPSHOT_IDENTIFIER_MAX_LENGTH`` characters first and
    only then loses a single trailing separator, so a cut that lands on a
    separator yields 63 characters.
    """
    name = SEPARATOR.join((prefix, cluster_identifier))
    if len(name) >= SNAPSHOT_IDENTIFIER_MAX_LENGTH:
        name = name[:SNAPSHOT_IDENTIFIER_MAX_LENGTH]
    return name.removesuffix(SEPARATOR)


def run_prefix(now: float | None = None) -> str:
    """Default prefix for one invocation: ``run-<unix seconds>``."""
    timestamp = time.time() if now is None else now
    return f"run-{int(timestamp)}"
