"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from invoicedash.domain.entities import (
    Customer,
    CustomerWithInvoices,
    Invoice,
    InvoiceStatus,
    InvoiceWithCustomer,
    Revenue,
    User,
)


class Database(ABC):
    """Abstract backend query client for invoicedash.

    Implementations issue table-scoped reads and inserts and return
    domain row entities. Any backend failure is raised as-is; mapping
    failures to user-facing messages is the job of the domain services.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Revenue operations
    @abstractmethod
    def list_revenue(self) -> list[Revenue]:
        """List all revenue rows."""
        pass

    @abstractmethod
    def insert_revenue(self, month: str, revenue: int) -> None:
        """Insert a revenue row."""
        pass

    # Invoice operations
    @abstractmethod
    def list_latest_invoices(self, limit: int) -> list[InvoiceWithCustomer]:
        """List the most recent invoices with their customers, newest first."""
        pass

    @abstractmethod
    def list_invoice_amounts(self) -> list[tuple[InvoiceStatus, int]]:
        """List (status, amount) for every invoice."""
        pass

    @abstractmethod
    def search_invoices(self, query: str, offset: int, limit: int) -> list[InvoiceWithCustomer]:
        """Search invoices, newest first.

        The query is matched case-insensitively as a substring of the
        customer name, customer email, amount, date or status.
        """
        pass

    @abstractmethod
    def count_invoices(self, query: str) -> int:
        """Count invoices matching the same predicate as search_invoices."""
        pass

    @abstractmethod
    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        """Get invoice by ID."""
        pass

    @abstractmethod
    def insert_invoice(
        self,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
        date: date,
        invoice_id: Optional[str] = None,
    ) -> str:
        """Insert an invoice. Returns invoice ID."""
        pass

    # Customer operations
    @abstractmethod
    def list_customer_ids(self) -> list[str]:
        """List the IDs of all customers."""
        pass

    @abstractmethod
    def list_customers(self) -> list[Customer]:
        """List all customers ordered by name."""
        pass

    @abstractmethod
    def search_customers(self, query: str) -> list[CustomerWithInvoices]:
        """Search customers by name or email, with their invoices."""
        pass

    @abstractmethod
    def insert_customer(self, customer_id: str, name: str, email: str, image_url: str) -> str:
        """Insert a customer. Returns customer ID."""
        pass

    # User operations
    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        pass

    @abstractmethod
    def insert_user(self, user_id: str, name: str, email: str, password_hash: str) -> str:
        """Insert a user. Returns user ID."""
        pass
