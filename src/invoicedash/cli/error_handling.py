"""CLI error handling helpers.

Domain services raise `FetchError` or `SeedError` with a message that is
safe to show; configuration problems surface as plain `ValueError`.
Both end the command with `Error: ...` on stderr and exit status 1.
"""

import logging

import click

from invoicedash.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_config_error(ctx: click.Context, error: ValueError) -> None:
    """Render an invalid environment setting before any command runs."""
    logger.debug("Configuration rejected: %s", error)
    click.echo(f"Error: Invalid configuration: {error}", err=True)
    ctx.exit(1)
