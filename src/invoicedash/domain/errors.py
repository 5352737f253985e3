"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class FetchError(DomainError):
    """A backend query failed.

    The message is the generic text for the failed operation; the
    underlying backend error is logged and never carried along.
    """


class SeedError(DomainError):
    """A seeding phase failed."""


REVENUE_FETCH_FAILED = "Failed to fetch revenue data."
LATEST_INVOICES_FETCH_FAILED = "Failed to fetch the latest invoices."
CARD_DATA_FETCH_FAILED = "Failed to fetch card data."
FILTERED_INVOICES_FETCH_FAILED = "Failed to fetch filtered invoices."
INVOICE_PAGES_FETCH_FAILED = "Failed to fetch total number of invoice pages."
INVOICE_FETCH_FAILED = "Failed to fetch invoice."
CUSTOMERS_FETCH_FAILED = "Failed to fetch all customers."
FILTERED_CUSTOMERS_FETCH_FAILED = "Failed to fetch filtered customers."
USER_FETCH_FAILED = "Failed to fetch user."


def invoice_not_found(invoice_id: str) -> str:
    """Return message for missing invoice."""
    return f"Invoice {invoice_id} not found"


def user_not_found(email: str) -> str:
    """Return message for missing user."""
    return f"User '{email}' not found"


def seed_phase_failed(table: str) -> str:
    """Return message for a failed seeding phase."""
    return f"Error seeding {table}"
