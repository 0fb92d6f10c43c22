"""Credential lookup module."""

from git_credential_pass.credential.candidates import (
    OrderedSet,
    candidates_for,
    compose,
    compose_candidates,
)
from git_credential_pass.credential.extract import extract_credential, find_username
from git_credential_pass.credential.lookup import lookup_credential
from git_credential_pass.credential.models import Credential, CredentialRequest
from git_credential_pass.credential.protocol import (
    parse_attributes,
    read_request,
    write_response,
)
from git_credential_pass.credential.resolver import (
    EntryStore,
    Probe,
    entry_name,
    probe_entries,
    resolve_entry,
)
from git_credential_pass.credential.variants import host_variants, path_variants

__all__ = [
    # Models
    "Credential",
    "CredentialRequest",
    # Variants and candidates
    "host_variants",
    "path_variants",
    "OrderedSet",
    "compose",
    "compose_candidates",
    "candidates_for",
    # Matching
    "EntryStore",
    "Probe",
    "entry_name",
    "resolve_entry",
    "probe_entries",
    # Extraction
    "extract_credential",
    "find_username",
    # Lookup
    "lookup_credential",
    # Protocol
    "parse_attributes",
    "read_request",
    "write_response",
]
