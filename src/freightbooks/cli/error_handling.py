"""CLI error handling helpers."""

import logging

import click

from freightbooks.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Report a failed report command and exit with status 1.

    The message goes to stderr; the traceback is only logged at debug level,
    so it shows up with ``--verbose``.
    """
    logger.debug("%s failed: %s", ctx.command_path or "command", error, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
