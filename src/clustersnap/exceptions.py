"""Public exception types for clustersnap."""

from __future__ import annotations

from botocore.exceptions import ClientError


class ClustersnapError(Exception):
    """Base class for all clustersnap exceptions."""


class NoIdentifiersSpecifiedError(ClustersnapError):
    """Raised when a snapshot batch is triggered without any cluster identifiers."""

    def __init__(self, message: str = "received no cluster identifiers") -> None:
        super().__init__(message)


class ConfigurationError(ClustersnapError):
    """Raised when a BackupConfig cannot be built from the supplied values."""


CLUSTER_NOT_FOUND_CODE = "DBClusterNotFoundFault"


def is_cluster_not_found(exc: BaseException) -> bool:
    """Return True if ``exc`` is RDS reporting that the cluster does not exist.

    boto3's modeled ``DBClusterNotFoundFault`` is a ``ClientError`` subclass
    carrying this error code, so the check works for both.
    """
    if not isinstance(exc, ClientError):
        return False
    return exc.response.get("Error", {}).get("Code") == CLUSTER_NOT_FOUND_CODE
