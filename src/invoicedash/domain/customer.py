"""Customer domain service."""

import logging

from invoicedash.database.base import Database
from invoicedash.domain.entities import CustomerField, CustomersTableRow
from invoicedash.domain.errors import (
    CUSTOMERS_FETCH_FAILED,
    FILTERED_CUSTOMERS_FETCH_FAILED,
    FetchError,
)
from invoicedash.domain.presentation import (
    customer_field_from_row,
    customers_table_row_from_row,
)

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for reading customers."""

    def __init__(self, db: Database):
        """Initialize customer service.

        Args:
            db: Database instance
        """
        self.db = db

    def fetch_customers(self) -> list[CustomerField]:
        """Fetch id and name of every customer, ordered by name.

        Raises:
            FetchError: If the backend query fails
        """
        try:
            return [customer_field_from_row(c) for c in self.db.list_customers()]
        except Exception as err:
            logger.error("Database Error: %s", err)
            raise FetchError(CUSTOMERS_FETCH_FAILED) from None

    def fetch_filtered_customers(self, query: str) -> list[CustomersTableRow]:
        """Fetch customers whose name or email match, with invoice totals.

        Customers without invoices are included with zero totals.

        Raises:
            FetchError: If the backend query fails
        """
        try:
            rows = self.db.search_customers(query)
            return [customers_table_row_from_row(row) for row in rows]
        except Exception as err:
            logger.error("Database Error: %s", err)
            raise FetchError(FILTERED_CUSTOMERS_FETCH_FAILED) from None
