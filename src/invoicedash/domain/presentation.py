"""Reshaping of backend rows into the records the dashboard renders.

Joined rows carry the customer as a nested entity; every function here
flattens those fields onto a single presentation record and formats
amounts for display.
"""

from typing import Iterable

from invoicedash.domain import entities as domain
from invoicedash.domain.entities import InvoiceStatus
from invoicedash.utils.currency import cents_to_dollars, format_currency


def _sum_by_status(amounts: Iterable[tuple[InvoiceStatus, int]], status: InvoiceStatus) -> int:
    return sum(amount for row_status, amount in amounts if row_status == status)


def latest_invoice_from_row(row: domain.InvoiceWithCustomer) -> domain.LatestInvoice:
    """Flatten an invoice and its customer for the latest-invoices card."""
    if row.customer is None:
        raise ValueError(f"Invoice {row.invoice.id} has no customer")
    return domain.LatestInvoice(
        id=row.invoice.id,
        name=row.customer.name,
        image_url=row.customer.image_url,
        email=row.customer.email,
        amount=format_currency(row.invoice.amount),
        date=row.invoice.date,
    )


def invoices_table_row_from_row(row: domain.InvoiceWithCustomer) -> domain.InvoicesTableRow:
    """Flatten an invoice and its customer for the invoices table.

    Customer fields are None when the customer was not loaded.
    """
    customer = row.customer
    return domain.InvoicesTableRow(
        id=row.invoice.id,
        customer_id=row.invoice.customer_id,
        name=customer.name if customer else None,
        email=customer.email if customer else None,
        image_url=customer.image_url if customer else None,
        date=row.invoice.date,
        amount=format_currency(row.invoice.amount),
        status=row.invoice.status,
    )


def invoice_form_from_row(invoice: domain.Invoice) -> domain.InvoiceForm:
    """Convert an invoice to its edit form, with the amount in dollars."""
    return domain.InvoiceForm(
        id=invoice.id,
        customer_id=invoice.customer_id,
        amount=cents_to_dollars(invoice.amount),
        status=invoice.status,
    )


def customer_field_from_row(customer: domain.Customer) -> domain.CustomerField:
    return domain.CustomerField(id=customer.id, name=customer.name)


def customers_table_row_from_row(row: domain.CustomerWithInvoices) -> domain.CustomersTableRow:
    """Aggregate a customer's invoices into pending and paid totals."""
    amounts = [(inv.status, inv.amount) for inv in row.invoices]
    return domain.CustomersTableRow(
        id=row.customer.id,
        name=row.customer.name,
        email=row.customer.email,
        image_url=row.customer.image_url,
        total_invoices=len(row.invoices),
        total_pending=format_currency(_sum_by_status(amounts, InvoiceStatus.PENDING)),
        total_paid=format_currency(_sum_by_status(amounts, InvoiceStatus.PAID)),
    )


def card_data_from_rows(
    invoice_amounts: list[tuple[InvoiceStatus, int]], customer_ids: list[str]
) -> domain.CardData:
    """Compute dashboard card totals from fetched invoice and customer rows."""
    return domain.CardData(
        number_of_customers=len(customer_ids),
        number_of_invoices=len(invoice_amounts),
        total_paid_invoices=format_currency(_sum_by_status(invoice_amounts, InvoiceStatus.PAID)),
        total_pending_invoices=format_currency(
            _sum_by_status(invoice_amounts, InvoiceStatus.PENDING)
        ),
    )
