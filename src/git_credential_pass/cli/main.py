"""git-credential-pass CLI.

Configure git with::

    git config --global credential.helper pass
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from git_credential_pass.cli.get import get_command
from git_credential_pass.cli.ignore import make_ignore_command
from git_credential_pass.cli.probe import probe_command
from git_credential_pass.cli.utils import helper_errors
from git_credential_pass.config.loader import load_config
from git_credential_pass.core.logging import configure_logging, set_request_id

try:
    __version__ = version("git-credential-pass")
except PackageNotFoundError:
    __version__ = "0.0.0"


class HelperGroup(click.Group):
    """Group that accepts any action git may send.

    Unknown actions drain stdin and exit 0 without output.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is None and not cmd_name.startswith("-"):
            return make_ignore_command(cmd_name)
        return command


@click.group(cls=HelperGroup)
@click.version_option(version=__version__, prog_name="git-credential-pass")
@click.option("--pass", "pass_executable", default=None, help="pass executable to decrypt with")
@click.option(
    "--store",
    "store_dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Password store directory [default: $PASSWORD_STORE_DIR or ~/.password-store]",
)
@click.option("--prefix", default=None, help="Store directory holding git entries [default: git]")
@click.option("--suffix", default=None, help="Appended to every entry name, e.g. /token")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file [default: ~/.config/git-credential-pass/config.yaml]",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging on stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    pass_executable: str | None,
    store_dir: Path | None,
    prefix: str | None,
    suffix: str | None,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """git credential helper that looks up entries in pass.

    For host www.github.com and path cassava/repo.git the entries
    git/www.github.com/cassava/repo, git/www.github.com/cassava,
    git/www.github.com, git/github.com/cassava/repo, ... are tried in
    order. The first line of the first existing entry is the password;
    a 'user:' or 'username:' line supplies the username.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    level = "DEBUG" if verbose else None

    # stderr-only defaults until the config file has been read
    configure_logging(level=level)
    set_request_id()

    with helper_errors():
        config = load_config(
            config_path,
            store={
                "pass_executable": pass_executable,
                "store_dir": str(store_dir) if store_dir else None,
                "prefix": prefix,
                "suffix": suffix,
            },
        )
    ctx.obj["config"] = config

    configure_logging(config=config.logging, level=level)


cli.add_command(get_command, name="get")
cli.add_command(make_ignore_command("store"))
cli.add_command(make_ignore_command("erase"))
cli.add_command(probe_command, name="test")


if __name__ == "__main__":
    cli()
