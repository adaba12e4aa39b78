"""Main CLI entry point."""

import os

import click

from caravanlog.cli.commands import shell
from caravanlog.cli.error_handling import handle_domain_error
from caravanlog.config import load_settings
from caravanlog.domain.errors import DomainError
from caravanlog.store.factories import STORE_BACKENDS
from caravanlog.utils.logger import LEVELS, setup_logger


@click.group()
@click.option("--baseline-price", help="Price a new draft starts with (default 30000)")
@click.option("--premium-price", help="Premium tariff price (default 40000)")
@click.option(
    "--store",
    type=click.Choice(STORE_BACKENDS),
    help="Entry store backend; both keep entries in memory only",
)
@click.option(
    "--log-level",
    type=click.Choice(list(LEVELS), case_sensitive=False),
    help="Logging level for messages on stderr",
)
@click.pass_context
def cli(
    ctx,
    baseline_price: str | None,
    premium_price: str | None,
    store: str | None,
    log_level: str | None,
):
    """Caravanlog - Caravan weighbridge log.

    Record plate numbers with loaded and empty weights, compute net weight,
    and search the session's entries. Nothing is saved between sessions.

    Options override the CARAVANLOG_BASELINE_PRICE, CARAVANLOG_PREMIUM_PRICE,
    CARAVANLOG_STORE and CARAVANLOG_LOG_LEVEL environment variables.
    """
    ctx.ensure_object(dict)

    overrides = {
        "CARAVANLOG_BASELINE_PRICE": baseline_price,
        "CARAVANLOG_PREMIUM_PRICE": premium_price,
        "CARAVANLOG_STORE": store,
        "CARAVANLOG_LOG_LEVEL": log_level,
    }
    environ = dict(os.environ)
    environ.update({key: value for key, value in overrides.items() if value is not None})

    try:
        settings = load_settings(environ)
    except DomainError as e:
        handle_domain_error(ctx, e)

    setup_logger(level=settings.log_level)
    ctx.obj["settings"] = settings


# Register all commands
shell.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
