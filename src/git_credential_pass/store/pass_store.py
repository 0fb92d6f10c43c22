"""pass(1) password store backend.

Existence is checked on disk (``<store_dir>/<name>.gpg``) so probing never
decrypts. Only the matched entry is read through ``pass show``, which
talks to gpg-agent.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

import structlog

from git_credential_pass.core.errors import StoreError

log = structlog.get_logger()

GPG_EXTENSION = ".gpg"


class PassStore:
    """EntryStore backed by a pass directory and executable."""

    def __init__(
        self,
        store_dir: Path | str,
        *,
        pass_executable: str = "pass",
        timeout_sec: float = 30.0,
    ) -> None:
        self._store_dir = Path(store_dir)
        self._pass_executable = pass_executable
        self._timeout_sec = timeout_sec

    @property
    def store_dir(self) -> Path:
        return self._store_dir

    @staticmethod
    def _normalize(name: str) -> str:
        # An empty prefix yields "/candidate"
        return name.lstrip("/")

    def entry_path(self, name: str) -> Path | None:
        """Encrypted file for an entry, or None if the name escapes the store."""
        # Lexical containment; symlinks below the root are followed by is_file()
        root = Path(os.path.abspath(self._store_dir))
        path = Path(os.path.normpath(root / f"{self._normalize(name)}{GPG_EXTENSION}"))
        if not path.is_relative_to(root):
            log.debug("entry_outside_store", entry=name)
            return None
        return path

    def exists(self, name: str) -> bool:
        path = self.entry_path(name)
        return path is not None and path.is_file()

    def read(self, name: str) -> str:
        """Decrypt an entry with ``pass show``.

        Raises:
            StoreError: If pass is missing, fails, or times out.
        """
        entry = self._normalize(name)
        env = {**os.environ, "PASSWORD_STORE_DIR": str(self._store_dir)}
        try:
            result = subprocess.run(
                [self._pass_executable, "show", entry],
                capture_output=True,
                text=True,
                timeout=self._timeout_sec,
                env=env,
                check=False,
            )
        except FileNotFoundError as e:
            raise StoreError.unavailable(self._pass_executable, "not found in PATH") from e
        except PermissionError as e:
            raise StoreError.unavailable(self._pass_executable, "not executable") from e
        except subprocess.TimeoutExpired as e:
            raise StoreError.timeout(entry, self._timeout_sec) from e

        if result.returncode != 0:
            raise StoreError.read_failed(entry, result.returncode, result.stderr or "")
        return result.stdout
