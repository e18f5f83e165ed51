"""Configuration for a snapshot run."""

from __future__ import annotations

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .naming import run_prefix


class BackupConfig(BaseSettings):
    """Validated settings for one invocation, read from ``CLUSTERSNAP_*`` variables.

    Values passed to the constructor win over the environment. An unset
    prefix means a fresh run prefix.
    """

    model_config = SettingsConfigDict(env_prefix="CLUSTERSNAP_", env_ignore_empty=True, extra="forbid")

    prefix: str | None = None
    region: str | None = None
    profile: str | None = None
    dry_run: bool = False

    def resolved_prefix(self) -> str:
        return self.prefix if self.prefix is not None else run_prefix()


def load_config(**overrides: object) -> BackupConfig:
    """Build a BackupConfig from the environment and explicit overrides.

    ``None`` overrides are ignored so the environment value stays in effect.
    Raises ``ConfigurationError`` if the merged values do not validate.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return BackupConfig(**values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
