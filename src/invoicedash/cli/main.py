"""Main CLI entry point."""

import logging

import click
from invoicedash.cli.error_handling import handle_config_error
from invoicedash.config import get_config
from invoicedash.database.factories import create_database

# Import and register all commands at module level
from invoicedash.cli.commands import (
    dashboard,
    invoices,
    customers,
    users,
    seed_cmd,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging once and set the package log level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("invoicedash").setLevel(level.upper())


@click.group()
@click.option(
    "--database-url",
    help="SQLAlchemy URL of the backend (overrides INVOICEDASH_DATABASE_URL)",
    envvar="INVOICEDASH_DATABASE_URL",
)
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to a SQLite database file, used when no URL is given "
    "(overrides INVOICEDASH_DB_PATH)",
    envvar="INVOICEDASH_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides INVOICEDASH_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx, database_url: str | None, db_path: str | None, log_level: str | None):
    """Invoicedash - invoicing dashboard data tools.

    Query revenue, invoices, customers and users from the dashboard
    backend, check credentials, and seed a fresh backend.
    """
    ctx.ensure_object(dict)
    try:
        config = get_config()
    except ValueError as e:
        handle_config_error(ctx, e)
    configure_logging(log_level or config.log_level)
    ctx.obj["config"] = config

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_database(database_url=database_url, database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
dashboard.register_commands(cli)
invoices.register_commands(cli)
customers.register_commands(cli)
users.register_commands(cli)
seed_cmd.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
