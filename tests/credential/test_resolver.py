"""Tests for credential/resolver.py."""

from __future__ import annotations

from git_credential_pass.credential.candidates import candidates_for
from git_credential_pass.credential.models import CredentialRequest
from git_credential_pass.credential.resolver import (
    EntryStore,
    Probe,
    entry_name,
    probe_entries,
    resolve_entry,
)
from git_credential_pass.store.memory import MemoryStore

GITHUB_REQUEST = CredentialRequest(
    protocol="https",
    host="www.github.com",
    path="/cassava/git-credential-pass",
)


class RecordingStore(MemoryStore):
    """MemoryStore that records every existence check."""

    def __init__(self, entries: dict[str, str]) -> None:
        super().__init__(entries)
        self.checked: list[str] = []

    def exists(self, name: str) -> bool:
        self.checked.append(name)
        return super().exists(name)


class TestEntryName:
    """Tests for entry_name function."""

    def test_prefix_candidate_suffix(self) -> None:
        assert entry_name("git", "github.com", "") == "git/github.com"
        assert entry_name("git", "github.com", "/token") == "git/github.com/token"

    def test_empty_prefix_keeps_separator(self) -> None:
        assert entry_name("", "github.com", "") == "/github.com"


class TestResolveEntry:
    """Tests for resolve_entry function."""

    def test_matches_primary_domain_entry(self) -> None:
        """Only git/github.com exists, so github.com is selected."""
        store = MemoryStore({"git/github.com": "secret"})

        result = resolve_entry(candidates_for(GITHUB_REQUEST), store, prefix="git")

        assert result == "github.com"

    def test_empty_store_returns_none(self) -> None:
        """No entries means no match, not an error."""
        result = resolve_entry(candidates_for(GITHUB_REQUEST), MemoryStore(), prefix="git")
        assert result is None

    def test_most_specific_entry_wins(self) -> None:
        """Earlier candidates beat later ones."""
        store = MemoryStore(
            {
                "git/github.com": "general",
                "git/www.github.com/cassava": "specific",
            }
        )

        result = resolve_entry(candidates_for(GITHUB_REQUEST), store, prefix="git")

        assert result == "www.github.com/cassava"

    def test_stops_at_first_match(self) -> None:
        """Probing short-circuits in candidate order."""
        store = RecordingStore({"git/www.github.com": "secret"})

        resolve_entry(candidates_for(GITHUB_REQUEST), store, prefix="git")

        assert store.checked == [
            "git/www.github.com/cassava/git-credential-pass",
            "git/www.github.com/cassava",
            "git/www.github.com",
        ]

    def test_suffix_applied(self) -> None:
        """Suffix is appended to every probed entry."""
        store = MemoryStore({"git/github.com/token": "secret"})

        result = resolve_entry(
            candidates_for(GITHUB_REQUEST), store, prefix="git", suffix="/token"
        )

        assert result == "github.com"


class TestProbeEntries:
    """Tests for probe_entries function."""

    def test_probes_every_candidate_in_order(self) -> None:
        """All candidates are checked, matches flagged."""
        store = MemoryStore({"git/github.com": "s", "git/www.github.com": "s"})

        candidates = ["www.github.com/x", "www.github.com", "github.com"]

        probes = probe_entries(candidates, store, prefix="git")

        assert probes == [
            Probe("www.github.com/x", "git/www.github.com/x", False),
            Probe("www.github.com", "git/www.github.com", True),
            Probe("github.com", "git/github.com", True),
        ]


class TestEntryStoreProtocol:
    """EntryStore is a runtime-checkable protocol."""

    def test_memory_store_satisfies_protocol(self) -> None:
        assert isinstance(MemoryStore(), EntryStore)
