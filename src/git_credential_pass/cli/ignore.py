"""store/erase and unknown actions - accepted and ignored.

Credentials live in pass and are managed with pass itself. git treats a
silent helper that exits 0 as "nothing to do".
"""

import click
import structlog

from git_credential_pass.credential.protocol import parse_attributes

log = structlog.get_logger()


def make_ignore_command(action: str) -> click.Command:
    """Command that drains the request and does nothing."""

    @click.command(name=action, help=f"Accept a '{action}' request and ignore it.")
    def ignore_command() -> None:
        attributes = parse_attributes(click.get_text_stream("stdin"))
        log.debug("action_ignored", action=action, host=attributes.get("host", ""))

    return ignore_command
