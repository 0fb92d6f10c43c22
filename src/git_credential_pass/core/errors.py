"""git-credential-pass error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Store
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Store (3xxx)
    STORE_UNAVAILABLE = 3001
    STORE_READ_FAILED = 3002
    STORE_TIMEOUT = 3003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class HelperError(Exception):
    """Base error with structured context for diagnostics."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'STORE_READ_FAILED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(HelperError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class StoreError(HelperError):
    """Password store backend errors.

    Raised only at the store boundary. A missing entry is not an error.
    """

    @classmethod
    def unavailable(cls, executable: str, reason: str) -> "StoreError":
        return cls(
            code=ErrorCode.STORE_UNAVAILABLE,
            message=f"Password store executable '{executable}' is unavailable: {reason}",
            details={"executable": executable, "reason": reason},
        )

    @classmethod
    def read_failed(cls, name: str, returncode: int, stderr: str) -> "StoreError":
        return cls(
            code=ErrorCode.STORE_READ_FAILED,
            message=f"Failed to read entry '{name}' (exit status {returncode})",
            details={"name": name, "returncode": returncode, "stderr": stderr.strip()},
        )

    @classmethod
    def timeout(cls, name: str, timeout_sec: float) -> "StoreError":
        return cls(
            code=ErrorCode.STORE_TIMEOUT,
            message=f"Reading entry '{name}' timed out after {timeout_sec:g}s",
            retryable=True,
            details={"name": name, "timeout_sec": timeout_sec},
        )


class InternalError(HelperError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
