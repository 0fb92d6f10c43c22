"""Host and path shortening.

Both generators return variants most specific first. Earlier variants win
when candidates are composed.
"""

from __future__ import annotations

import re

# Digits and dots with an optional port. Never shortened.
_IP_LITERAL = re.compile(r"^[0-9.]+(:[0-9]+)?$")
_PORT_SUFFIX = re.compile(r":([0-9]+)$")


def host_variants(host: str) -> list[str]:
    """Shorten host one label at a time down to the primary domain.

    ``www.github.com`` yields ``www.github.com`` and ``github.com``. A port
    stays attached to the last label, and every ``:port`` variant is
    followed (after all dotted variants) by its ``#port`` spelling, since
    ``:`` is awkward in file names.

    Examples:
        >>> host_variants("a.b.c.d")
        ['a.b.c.d', 'b.c.d', 'c.d']
        >>> host_variants("git.example.com:8443")
        ['git.example.com:8443', 'example.com:8443', 'git.example.com#8443', 'example.com#8443']
    """
    if _IP_LITERAL.match(host) or "." not in host:
        base = [host]
    else:
        labels = host.split(".")
        base = [".".join(labels[k:]) for k in range(len(labels) - 1)]

    hashed = [_PORT_SUFFIX.sub(r"#\1", variant) for variant in base if _PORT_SUFFIX.search(variant)]
    return base + hashed


def path_variants(path: str) -> list[str]:
    """Shorten path one segment at a time, ending with the host-only ``""``.

    Examples:
        >>> path_variants("/cassava/repo.git")
        ['cassava/repo', 'cassava', '']
        >>> path_variants("")
        ['']
    """
    path = path.removesuffix(".git").removeprefix("/")
    segments = path.split("/") if path else []

    variants = []
    for k in range(len(segments), 0, -1):
        prefix = "/".join(segments[:k])
        if prefix:
            variants.append(prefix)
    variants.append("")
    return variants
