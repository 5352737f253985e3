"""Customer listing commands."""

import click
from invoicedash.cli.error_handling import handle_domain_error
from invoicedash.domain.customer import CustomerService
from invoicedash.domain.errors import DomainError


@click.group()
def customers_group():
    """Browse customers."""
    pass


@customers_group.command("list")
@click.pass_context
def list_customers(ctx):
    """List all customers by name."""
    db = ctx.obj["db"]
    service = CustomerService(db)

    try:
        customers = service.fetch_customers()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not customers:
        click.echo("No customers found.")
        return

    click.echo("\nCustomers:")
    click.echo("-" * 60)
    for customer in customers:
        click.echo(f"{customer.name:25s} | ID: {customer.id}")


@customers_group.command("search")
@click.argument("query", default="", metavar="[QUERY]")
@click.pass_context
def search_customers(ctx, query: str):
    """Search customers by name or email and show invoice totals.

    Examples:
        invoicedash customers search
        invoicedash customers search "rabbit"
    """
    db = ctx.obj["db"]
    service = CustomerService(db)

    try:
        customers = service.fetch_filtered_customers(query)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"\nFound {len(customers)} customer(s):")
    click.echo("-" * 100)
    for row in customers:
        click.echo(
            f"{row.name:20s} | {row.email:25s} | Invoices: {row.total_invoices:3d} | "
            f"Pending: {row.total_pending:>12s} | Paid: {row.total_paid:>12s}"
        )


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customers_group, name="customers")
