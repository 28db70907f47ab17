"""Runtime settings — env-driven, tool-aware.

Centralized settings using pydantic-settings for environment variable
support. Reads from .env file and JNLPFORGE_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ForgeSettings(BaseSettings):
    """Runtime settings with environment variable overrides.

    All settings can be overridden via JNLPFORGE_* environment variables
    or a .env file in the working directory.

    Examples
    --------
    Override via environment::

        export JNLPFORGE_LOG_LEVEL=DEBUG
        export JNLPFORGE_MAX_WORKERS=4
        export JNLPFORGE_JARSIGNER_TOOL=/opt/jdk/bin/jarsigner
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="JNLPFORGE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Upper bound for the per-jar manifest/sign fan-out
    max_workers: int = Field(default=8, ge=1)

    # External JDK tools
    jar_tool: str = "jar"
    jarsigner_tool: str = "jarsigner"
    keytool_tool: str = "keytool"

    # Project defaults
    project_file: Path = Path("jnlpforge.toml")
    default_output: Path = Path("target/webstart")
