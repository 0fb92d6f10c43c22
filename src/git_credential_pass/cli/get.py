"""git-credential-pass get - answer a credential request from git."""

import click
import structlog

from git_credential_pass.cli.utils import build_store, get_config, helper_errors
from git_credential_pass.credential.lookup import lookup_credential
from git_credential_pass.credential.protocol import read_request, write_response

log = structlog.get_logger()


@click.command()
@click.pass_context
def get_command(ctx: click.Context) -> None:
    """Read a request on stdin and print the matching credential.

    Prints nothing when no entry matches.
    """
    config = get_config(ctx)
    request = read_request(click.get_text_stream("stdin"))
    log.debug("request_received", protocol=request.protocol, host=request.host)

    if not request.host:
        log.warning("request_without_host")
        return

    with helper_errors():
        credential = lookup_credential(
            request,
            build_store(config),
            prefix=config.store.prefix,
            suffix=config.store.suffix,
        )

    write_response(credential, click.get_text_stream("stdout"))
