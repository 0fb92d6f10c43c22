"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides in-memory and on-disk password stores.
"""

import logging
import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
# This ensures that the local git_credential_pass package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of git_credential_pass modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("git_credential_pass"):
        del sys.modules[module_name]

from git_credential_pass.store.memory import MemoryStore  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's store, config and env vars out of tests."""
    monkeypatch.delenv("PASSWORD_STORE_DIR", raising=False)
    for key in list(os.environ):
        if key.upper().startswith("GIT_CREDENTIAL_PASS__"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(
        "git_credential_pass.config.loader.GLOBAL_CONFIG_PATH",
        tmp_path / "no-such-config.yaml",
    )


@pytest.fixture
def memory_store() -> MemoryStore:
    """Store holding github.com and a port-qualified host entry."""
    return MemoryStore(
        {
            "git/github.com": "gh-token\nuser: alice\n",
            "git/git.example.com#8443": "example-secret\nusername: bob\n",
        }
    )


@pytest.fixture
def pass_dir(tmp_path: Path) -> Path:
    """On-disk password store with a few empty .gpg files."""
    store = tmp_path / "password-store"
    for name in (
        "git/github.com",
        "git/www.github.com/cassava",
        "git/gitlab.com#8443",
    ):
        entry = store / f"{name}.gpg"
        entry.parent.mkdir(parents=True, exist_ok=True)
        entry.write_bytes(b"")
    return store


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers bound to streams that die with the test."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
