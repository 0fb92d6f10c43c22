"""Candidate entry names from host and path variants."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING

from git_credential_pass.credential.variants import host_variants, path_variants

if TYPE_CHECKING:
    from git_credential_pass.credential.models import CredentialRequest


class OrderedSet:
    """Insertion-ordered set of strings.

    Keeps a sequence for order and a set for membership. Adding an existing
    item is a no-op, so the first occurrence keeps its position.
    """

    __slots__ = ("_items", "_index")

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        self._index: set[str] = set()
        for item in items:
            self.add(item)

    def add(self, item: str) -> bool:
        """Append item unless present. Returns True if it was added."""
        if item in self._index:
            return False
        self._index.add(item)
        self._items.append(item)
        return True

    def __contains__(self, item: object) -> bool:
        return item in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({self._items!r})"

    def to_list(self) -> list[str]:
        return list(self._items)


def compose(host: str, path: str) -> str:
    """Join a host variant and a path variant into one candidate name."""
    return f"{host}/{path}" if path else host


def compose_candidates(hosts: Sequence[str], paths: Sequence[str]) -> list[str]:
    """Combine variants, host specificity first, dropping repeats.

    Every path variant of a host is tried before the next, shorter host.
    """
    seen = OrderedSet()
    for host in hosts:
        for path in paths:
            seen.add(compose(host, path))
    return seen.to_list()


def candidates_for(request: CredentialRequest) -> list[str]:
    """Ordered candidate names for a credential request."""
    return compose_candidates(host_variants(request.host), path_variants(request.path))
