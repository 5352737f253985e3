"""Dashboard overview commands: revenue, latest invoices and summary cards."""

import click
from invoicedash.cli.error_handling import handle_domain_error
from invoicedash.domain.errors import DomainError
from invoicedash.domain.invoice import InvoiceService
from invoicedash.domain.revenue import RevenueService
from invoicedash.utils.date_format import format_date_to_local


@click.command("revenue")
@click.option(
    "--delay",
    type=float,
    help="Simulated query latency in seconds (overrides INVOICEDASH_REVENUE_DELAY)",
)
@click.pass_context
def show_revenue(ctx, delay: float | None):
    """Show monthly revenue."""
    db = ctx.obj["db"]
    if delay is None:
        delay = ctx.obj["config"].revenue_delay
    service = RevenueService(db, delay=delay)

    try:
        revenue = service.fetch_revenue()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not revenue:
        click.echo("No revenue data found.")
        return

    click.echo("\nRevenue:")
    click.echo("-" * 30)
    for row in revenue:
        click.echo(f"{row.month:5s} | {row.revenue:>10,d}")


@click.command("latest")
@click.pass_context
def show_latest_invoices(ctx):
    """Show the five most recent invoices."""
    db = ctx.obj["db"]
    service = InvoiceService(db)

    try:
        invoices = service.fetch_latest_invoices()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not invoices:
        click.echo("No invoices found.")
        return

    click.echo("\nLatest Invoices:")
    click.echo("-" * 95)
    for inv in invoices:
        click.echo(
            f"{format_date_to_local(inv.date):12s} | {inv.name:25s} | "
            f"{inv.email:30s} | {inv.amount:>14s}"
        )


@click.command("cards")
@click.pass_context
def show_cards(ctx):
    """Show dashboard summary totals."""
    db = ctx.obj["db"]
    service = InvoiceService(db)

    try:
        cards = service.fetch_card_data()
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Collected:       {cards.total_paid_invoices}")
    click.echo(f"Pending:         {cards.total_pending_invoices}")
    click.echo(f"Total Invoices:  {cards.number_of_invoices}")
    click.echo(f"Total Customers: {cards.number_of_customers}")


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(show_revenue)
    cli.add_command(show_latest_invoices)
    cli.add_command(show_cards)
