"""Match candidates against a password store."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class EntryStore(Protocol):
    """Capability the resolver needs from a password store.

    exists() must be free of side effects. read() may decrypt and is
    called at most once per lookup.
    """

    def exists(self, name: str) -> bool:
        """Whether an entry with this name is present."""
        ...

    def read(self, name: str) -> str:
        """Decrypted content of an entry."""
        ...


@dataclass(frozen=True, slots=True)
class Probe:
    """Outcome of checking one candidate."""

    candidate: str
    entry: str
    exists: bool


def entry_name(prefix: str, candidate: str, suffix: str) -> str:
    """Fully qualified entry name: ``prefix/candidate`` plus suffix."""
    return f"{prefix}/{candidate}{suffix}"


def resolve_entry(
    candidates: Iterable[str],
    store: EntryStore,
    *,
    prefix: str,
    suffix: str = "",
) -> str | None:
    """Return the first candidate whose entry exists, or None.

    Stops probing at the first hit.
    """
    for candidate in candidates:
        if store.exists(entry_name(prefix, candidate, suffix)):
            return candidate
    return None


def probe_entries(
    candidates: Iterable[str],
    store: EntryStore,
    *,
    prefix: str,
    suffix: str = "",
) -> list[Probe]:
    """Check every candidate, preserving order. Used for diagnostics."""
    probes = []
    for candidate in candidates:
        name = entry_name(prefix, candidate, suffix)
        probes.append(Probe(candidate=candidate, entry=name, exists=store.exists(name)))
    return probes
