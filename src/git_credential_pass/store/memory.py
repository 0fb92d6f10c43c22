"""In-memory store."""

from __future__ import annotations

from collections.abc import Mapping


class MemoryStore:
    """EntryStore over a name -> content mapping.

    Names are matched exactly, including the prefix (``git/github.com``).
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries = dict(entries or {})
        self.reads: list[str] = []

    def exists(self, name: str) -> bool:
        return name in self._entries

    def read(self, name: str) -> str:
        self.reads.append(name)
        return self._entries[name]
