"""Core orchestration primitives."""

from .manager import BackupManager

__all__ = ["BackupManager"]
