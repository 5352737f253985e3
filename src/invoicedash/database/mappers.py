"""Mapper functions to convert SQLAlchemy models into domain row entities.

This layer isolates the conversion logic, so schema changes on the
backend only touch this module and the models.
"""

from invoicedash.domain import entities as domain
from invoicedash.database.models import (
    Customer as ORMCustomer,
    Invoice as ORMInvoice,
    Revenue as ORMRevenue,
    User as ORMUser,
)


def customer_to_domain(orm_customer: ORMCustomer) -> domain.Customer:
    """Convert SQLAlchemy Customer model to domain Customer entity."""
    return domain.Customer(
        id=orm_customer.id,
        name=orm_customer.name,
        email=orm_customer.email,
        image_url=orm_customer.image_url,
    )


def invoice_to_domain(orm_invoice: ORMInvoice) -> domain.Invoice:
    """Convert SQLAlchemy Invoice model to domain Invoice entity."""
    return domain.Invoice(
        id=orm_invoice.id,
        customer_id=orm_invoice.customer_id,
        amount=int(orm_invoice.amount),
        date=orm_invoice.date,
        status=domain.InvoiceStatus(orm_invoice.status),
    )


def invoice_with_customer_to_domain(orm_invoice: ORMInvoice) -> domain.InvoiceWithCustomer:
    """Convert an Invoice model and its loaded customer to a joined entity."""
    customer = orm_invoice.customer
    return domain.InvoiceWithCustomer(
        invoice=invoice_to_domain(orm_invoice),
        customer=customer_to_domain(customer) if customer is not None else None,
    )


def customer_with_invoices_to_domain(orm_customer: ORMCustomer) -> domain.CustomerWithInvoices:
    """Convert a Customer model and its loaded invoices to a joined entity."""
    return domain.CustomerWithInvoices(
        customer=customer_to_domain(orm_customer),
        invoices=tuple(invoice_to_domain(inv) for inv in orm_customer.invoices),
    )


def revenue_to_domain(orm_revenue: ORMRevenue) -> domain.Revenue:
    """Convert SQLAlchemy Revenue model to domain Revenue entity."""
    return domain.Revenue(month=orm_revenue.month, revenue=int(orm_revenue.revenue))


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        name=orm_user.name,
        email=orm_user.email,
        password=orm_user.password,
    )
