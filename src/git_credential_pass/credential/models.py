"""Credential request and result value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlparse


@dataclass(frozen=True, slots=True)
class CredentialRequest:
    """Attributes git sends when it needs a credential.

    host may carry a port as ``host:port`` (or ``host#port``). path is the
    repository path as sent by git, with or without a leading slash and
    ``.git`` suffix. username is set only when git already knows it.
    """

    protocol: str = ""
    host: str = ""
    path: str = ""
    username: str | None = None

    @classmethod
    def from_attributes(cls, attributes: dict[str, str]) -> CredentialRequest:
        """Build from parsed ``key=value`` protocol attributes.

        When host is missing but ``url`` is present, protocol, host and path
        are taken from the URL.
        """
        protocol = attributes.get("protocol", "")
        host = attributes.get("host", "")
        path = attributes.get("path", "")

        if not host and (url := attributes.get("url")):
            parsed = urlparse(url)
            host = parsed.netloc.rpartition("@")[2]
            protocol = protocol or parsed.scheme
            path = path or parsed.path

        return cls(
            protocol=protocol,
            host=host,
            path=path,
            username=attributes.get("username") or None,
        )


@dataclass(frozen=True, slots=True)
class Credential:
    """Password and optional username read from a store entry."""

    password: str = field(repr=False)
    username: str | None = None

    def to_attributes(self) -> dict[str, str]:
        """Serialize to protocol attributes, password first."""
        attributes = {"password": self.password}
        if self.username is not None:
            attributes["username"] = self.username
        return attributes
