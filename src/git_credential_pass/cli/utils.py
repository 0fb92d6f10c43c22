"""CLI utilities."""

from collections.abc import Iterator
from contextlib import contextmanager

import click
import structlog

from git_credential_pass.config.models import HelperConfig
from git_credential_pass.core.errors import HelperError, InternalError
from git_credential_pass.store.pass_store import PassStore

log = structlog.get_logger()


def get_config(ctx: click.Context) -> HelperConfig:
    """Config loaded by the root command."""
    config = ctx.find_object(dict) or {}
    return config.get("config") or HelperConfig()


def build_store(config: HelperConfig) -> PassStore:
    """Create the pass backend described by config."""
    return PassStore(
        config.store.store_dir,
        pass_executable=config.store.pass_executable,
        timeout_sec=config.store.timeout_sec,
    )


@contextmanager
def helper_errors() -> Iterator[None]:
    """Turn HelperError into a ClickException (stderr, exit status 1).

    Any other exception is reported as an InternalError the same way.

    Nothing reaches stdout, so git sees no partial response.
    """
    try:
        yield
    except HelperError as e:
        log.error("helper_failed", error=e.error_name, details=e.details)
        raise click.ClickException(str(e)) from e
    except Exception as e:
        error = InternalError.unexpected(str(e) or type(e).__name__, exception=type(e).__name__)
        log.exception("helper_crashed", error=error.error_name)
        raise click.ClickException(str(error)) from e
