"""Backend seeding command."""

import click
from invoicedash.cli.error_handling import handle_domain_error
from invoicedash.domain.errors import SeedError
from invoicedash.seed import seed_database


@click.command("seed")
@click.pass_context
def seed(ctx):
    """Populate the backend with placeholder users, customers, invoices and revenue.

    Meant to run once against an empty backend. Exits with status 1 if
    any table fails to seed.
    """
    db = ctx.obj["db"]

    try:
        counts = seed_database(db)
    except SeedError as e:
        handle_domain_error(ctx, e)

    for table, count in counts.items():
        click.echo(f"Seeded {count} {table}")


def register_commands(cli):
    """Register seed command with main CLI."""
    cli.add_command(seed)
