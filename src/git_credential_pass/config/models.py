"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Command-line flags (passed as overrides to load_config())
2. Environment variables (GIT_CREDENTIAL_PASS__SECTION__KEY)
3. YAML file (~/.config/git-credential-pass/config.yaml)
4. Built-in defaults (this file)

Environment Variable Format:
    GIT_CREDENTIAL_PASS__<SECTION>__<KEY>=<VALUE>

Examples:
    GIT_CREDENTIAL_PASS__LOGGING__LEVEL=DEBUG
    GIT_CREDENTIAL_PASS__STORE__PREFIX=git
    GIT_CREDENTIAL_PASS__STORE__STORE_DIR=/srv/password-store
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_STORE_DIR = "~/.password-store"


def _default_store_dir() -> str:
    # Same lookup order as pass(1) itself
    return str(Path(os.environ.get("PASSWORD_STORE_DIR") or DEFAULT_STORE_DIR).expanduser())


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    stdout is reserved for the credential protocol and is rejected.
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v == "stderr":
            return v
        if v == "stdout":
            raise ValueError("stdout is reserved for credential protocol output")
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GIT_CREDENTIAL_PASS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. git shows helper stderr on the terminal, keep it quiet.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class StoreConfig(BaseModel):
    """Password store configuration.

    Env vars:
        GIT_CREDENTIAL_PASS__STORE__PASS_EXECUTABLE: pass executable (default: pass)
        GIT_CREDENTIAL_PASS__STORE__STORE_DIR: Store root (default: $PASSWORD_STORE_DIR
            or ~/.password-store)
        GIT_CREDENTIAL_PASS__STORE__PREFIX: Entry name prefix (default: git)
        GIT_CREDENTIAL_PASS__STORE__SUFFIX: Entry name suffix (default: empty)
        GIT_CREDENTIAL_PASS__STORE__TIMEOUT_SEC: Timeout for decrypting an entry
    """

    pass_executable: str = Field(
        default="pass",
        description="Name or path of the pass executable used to decrypt entries.",
    )
    store_dir: str = Field(
        default_factory=_default_store_dir,
        description="Root directory of the password store.",
    )
    prefix: str = Field(
        default="git",
        description="Directory under the store root that holds git credentials.",
    )
    suffix: str = Field(
        default="",
        description="Appended to every candidate name, e.g. '/token'.",
    )
    timeout_sec: float = Field(
        default=30.0,
        description="Timeout for a single decryption. gpg-agent may prompt for a passphrase.",
    )

    @field_validator("store_dir")
    @classmethod
    def expand_store_dir(cls, v: str) -> str:
        return str(Path(v).expanduser())

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class HelperConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
