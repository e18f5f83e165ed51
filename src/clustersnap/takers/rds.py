"""Real snapshot taker: a boto3 RDS client."""

from __future__ import annotations

from typing import Any

import boto3


def create_rds_client(region: str | None = None, profile: str | None = None) -> Any:
    """Build an RDS client using boto3's default credential chain.

    The returned client already satisfies ``SnapshotTaker``.
    """
    session = boto3.session.Session(profile_name=profile, region_name=region)
    return session.client("rds")
