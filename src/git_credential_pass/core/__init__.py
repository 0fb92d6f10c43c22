"""Core module exports."""

from git_credential_pass.core.console import get_console, make_probe_table, status
from git_credential_pass.core.errors import (
    ConfigError,
    ErrorCode,
    HelperError,
    InternalError,
    StoreError,
)
from git_credential_pass.core.logging import (
    clear_request_id,
    configure_logging,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "HelperError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "StoreError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_request_id",
    "set_request_id",
    # Console
    "get_console",
    "make_probe_table",
    "status",
]
