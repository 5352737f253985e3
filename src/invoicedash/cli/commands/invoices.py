"""Invoice listing commands."""

import click
from invoicedash.cli.error_handling import handle_domain_error
from invoicedash.domain.errors import DomainError, invoice_not_found
from invoicedash.domain.invoice import InvoiceService
from invoicedash.utils.date_format import format_date_to_local
from invoicedash.utils.pagination import generate_pagination


@click.group()
def invoices_group():
    """Browse invoices."""
    pass


@invoices_group.command("list")
@click.argument("query", default="", metavar="[QUERY]")
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True, help="Page number")
@click.pass_context
def list_invoices(ctx, query: str, page: int):
    """List invoices matching QUERY, one page at a time.

    QUERY is matched against customer name and email, amount, date and
    status. Omit it to list every invoice.

    Examples:
        invoicedash invoices list
        invoicedash invoices list "lee" --page 2
        invoicedash invoices list pending
    """
    db = ctx.obj["db"]
    service = InvoiceService(db)

    try:
        rows = service.fetch_filtered_invoices(query, page)
        pages = service.fetch_invoices_pages(query)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not rows:
        click.echo("No invoices found.")
        return

    click.echo(f"\nInvoices (page {page} of {pages}):")
    click.echo("-" * 100)
    for row in rows:
        click.echo(
            f"{row.name or '':20s} | {row.email or '':25s} | {row.amount:>12s} | "
            f"{format_date_to_local(row.date):13s} | {row.status.value}"
        )

    links = " ".join(str(link) for link in generate_pagination(page, pages))
    click.echo(f"\nPages: {links}")


@invoices_group.command("pages")
@click.argument("query", default="", metavar="[QUERY]")
@click.pass_context
def count_pages(ctx, query: str):
    """Show how many pages of invoices match QUERY."""
    db = ctx.obj["db"]
    service = InvoiceService(db)

    try:
        pages = service.fetch_invoices_pages(query)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Total pages: {pages}")


@invoices_group.command("show")
@click.argument("invoice_id", metavar="INVOICE_ID")
@click.pass_context
def show_invoice(ctx, invoice_id: str):
    """Show a single invoice with its amount in dollars."""
    db = ctx.obj["db"]
    service = InvoiceService(db)

    try:
        invoice = service.fetch_invoice_by_id(invoice_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if invoice is None:
        click.echo(f"Error: {invoice_not_found(invoice_id)}", err=True)
        ctx.exit(1)

    click.echo(f"Invoice ID: {invoice.id}")
    click.echo(f"  Customer ID: {invoice.customer_id}")
    click.echo(f"  Amount: {invoice.amount:.2f}")
    click.echo(f"  Status: {invoice.status.value}")


def register_commands(cli):
    """Register invoice commands with main CLI."""
    cli.add_command(invoices_group, name="invoices")
