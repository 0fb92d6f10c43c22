"""Credential lookup: candidates, match, read, extract."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from git_credential_pass.credential.candidates import candidates_for
from git_credential_pass.credential.extract import extract_credential
from git_credential_pass.credential.resolver import entry_name, resolve_entry

if TYPE_CHECKING:
    from git_credential_pass.credential.models import Credential, CredentialRequest
    from git_credential_pass.credential.resolver import EntryStore

log = structlog.get_logger()


def lookup_credential(
    request: CredentialRequest,
    store: EntryStore,
    *,
    prefix: str,
    suffix: str = "",
) -> Credential | None:
    """Find and read the most specific entry for a request.

    Returns None when no candidate exists in the store.

    Raises:
        StoreError: If the matched entry cannot be read.
    """
    candidates = candidates_for(request)
    log.debug(
        "candidates_built",
        host=request.host,
        path=request.path,
        count=len(candidates),
    )

    matched = resolve_entry(candidates, store, prefix=prefix, suffix=suffix)
    if matched is None:
        log.debug("no_entry_found", host=request.host)
        return None

    name = entry_name(prefix, matched, suffix)
    log.debug("entry_matched", entry=name)

    # Never log content: it holds the secret
    credential = extract_credential(store.read(name), request.username)
    log.debug("credential_extracted", has_username=credential.username is not None)
    return credential
