"""Domain model entities for invoicedash.

Two families of plain data classes live here. Row entities mirror the
backend tables one to one and are what the database layer returns.
Presentation records are the flattened shapes the dashboard renders;
they are only ever built by the functions in
``invoicedash.domain.presentation``.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class InvoiceStatus(str, Enum):
    """Invoice lifecycle states stored by the backend."""

    PENDING = "pending"
    PAID = "paid"


# Backend rows


@dataclass(frozen=True)
class Customer:
    """Customer row."""

    id: str
    name: str
    email: str
    image_url: str


@dataclass(frozen=True)
class Invoice:
    """Invoice row. Amount is stored in integer cents."""

    id: str
    customer_id: str
    amount: int
    date: date
    status: InvoiceStatus


@dataclass(frozen=True)
class InvoiceWithCustomer:
    """Invoice row joined with its customer."""

    invoice: Invoice
    customer: Optional[Customer]


@dataclass(frozen=True)
class CustomerWithInvoices:
    """Customer row joined with all of its invoices."""

    customer: Customer
    invoices: tuple[Invoice, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Revenue:
    """Monthly revenue row."""

    month: str
    revenue: int


@dataclass(frozen=True)
class User:
    """User row. ``password`` holds the bcrypt hash, never plain text."""

    id: str
    name: str
    email: str
    password: str


# Presentation records


@dataclass(frozen=True)
class LatestInvoice:
    id: str
    name: str
    image_url: str
    email: str
    amount: str
    date: date


@dataclass(frozen=True)
class InvoicesTableRow:
    id: str
    customer_id: str
    name: Optional[str]
    email: Optional[str]
    image_url: Optional[str]
    date: date
    amount: str
    status: InvoiceStatus


@dataclass(frozen=True)
class InvoiceForm:
    """Editable invoice with the amount converted to dollars."""

    id: str
    customer_id: str
    amount: Decimal
    status: InvoiceStatus


@dataclass(frozen=True)
class CardData:
    """Dashboard summary card totals."""

    number_of_customers: int
    number_of_invoices: int
    total_paid_invoices: str
    total_pending_invoices: str


@dataclass(frozen=True)
class CustomerField:
    """Customer option for invoice forms."""

    id: str
    name: str


@dataclass(frozen=True)
class CustomersTableRow:
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str
