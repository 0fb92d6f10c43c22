"""Entry point for ``python -m git_credential_pass``."""

from git_credential_pass.cli.main import cli

if __name__ == "__main__":
    cli()
