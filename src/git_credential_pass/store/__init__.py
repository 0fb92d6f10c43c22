"""Password store backends."""

from git_credential_pass.store.memory import MemoryStore
from git_credential_pass.store.pass_store import GPG_EXTENSION, PassStore

__all__ = [
    "GPG_EXTENSION",
    "MemoryStore",
    "PassStore",
]
