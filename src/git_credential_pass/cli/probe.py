"""git-credential-pass test - show how a host and path would be matched."""

import click

from git_credential_pass.cli.utils import build_store, get_config, helper_errors
from git_credential_pass.core.console import get_console, make_probe_table, status
from git_credential_pass.credential.candidates import candidates_for
from git_credential_pass.credential.lookup import lookup_credential
from git_credential_pass.credential.models import CredentialRequest
from git_credential_pass.credential.protocol import write_response
from git_credential_pass.credential.resolver import probe_entries


@click.command()
@click.argument("host")
@click.argument("path", default="")
@click.option("--protocol", default="https", show_default=True, help="Request protocol")
@click.option("--username", default=None, help="Username git would already know")
@click.pass_context
def probe_command(
    ctx: click.Context,
    host: str,
    path: str,
    protocol: str,
    username: str | None,
) -> None:
    """Probe every candidate for HOST and PATH, then answer like 'get'.

    The candidate table goes to stderr, the response lines to stdout.
    No request is read from stdin.
    """
    config = get_config(ctx)
    store = build_store(config)
    request = CredentialRequest(protocol=protocol, host=host, path=path, username=username)

    probes = probe_entries(
        candidates_for(request),
        store,
        prefix=config.store.prefix,
        suffix=config.store.suffix,
    )
    matched = next((probe.candidate for probe in probes if probe.exists), None)

    status(f"Store: {store.store_dir}", style="info")
    get_console().print(make_probe_table(probes, matched=matched))
    if matched is None:
        status("No entry found", style="warning")
        return
    status(f"Matched {matched}", style="success")

    with helper_errors():
        credential = lookup_credential(
            request,
            store,
            prefix=config.store.prefix,
            suffix=config.store.suffix,
        )

    write_response(credential, click.get_text_stream("stdout"))
