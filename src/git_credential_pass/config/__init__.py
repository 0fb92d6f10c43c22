"""Config module exports."""

from git_credential_pass.config.loader import GLOBAL_CONFIG_PATH, load_config
from git_credential_pass.config.models import (
    HelperConfig,
    LoggingConfig,
    LogOutputConfig,
    StoreConfig,
)

__all__ = [
    "load_config",
    "GLOBAL_CONFIG_PATH",
    "HelperConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "StoreConfig",
]
