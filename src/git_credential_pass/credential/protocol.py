"""git credential helper line protocol.

See: https://git-scm.com/docs/git-credential#IOFMT

Input is ``key=value`` lines ended by a blank line or end of stream.
Output is ``key=value`` lines; no output means no credential.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from git_credential_pass.credential.models import CredentialRequest

if TYPE_CHECKING:
    from git_credential_pass.credential.models import Credential


def parse_attributes(stream: TextIO) -> dict[str, str]:
    """Read attributes up to the first blank line or EOF.

    Lines without ``=`` are ignored. A repeated key keeps its last value.
    """
    attributes: dict[str, str] = {}
    for raw in stream:
        line = raw.rstrip("\r\n")
        if not line:
            break
        key, sep, value = line.partition("=")
        if sep:
            attributes[key] = value
    return attributes


def read_request(stream: TextIO) -> CredentialRequest:
    return CredentialRequest.from_attributes(parse_attributes(stream))


def write_response(credential: Credential | None, stream: TextIO) -> None:
    """Write credential attributes, or nothing when there is no match."""
    if credential is None:
        return
    for key, value in credential.to_attributes().items():
        stream.write(f"{key}={value}\n")
    stream.flush()
