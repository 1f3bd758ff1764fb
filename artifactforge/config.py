"""Runtime configuration: env-driven.

Centralized config using pydantic-settings. Reads from a .env file and
ARTIFACTFORGE_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class ForgeConfig(BaseSettings):
    """Settings for building the recipe graph.

    All settings can be overridden via ARTIFACTFORGE_* environment
    variables or a .env file in the project root.

    Examples
    --------
    Override via environment::

        export ARTIFACTFORGE_SYSTEM=aarch64-linux
        export ARTIFACTFORGE_LOG_LEVEL=DEBUG
        export ARTIFACTFORGE_PERSIST_SPECS=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ARTIFACTFORGE_",
        env_file_encoding="utf-8",
    )

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    # Target platform override; detected from the host when unset
    system: str | None = None
    # Reject unknown platform tags at startup rather than at dispatch
    strict_platforms: bool = False

    # Spec store
    store_path: Path = Path(".artifactforge/specs")
    persist_specs: bool = False


# Module-level singleton; import as `from artifactforge.config import config`
config = ForgeConfig()
