"""Invoice domain service."""

import logging
from typing import Optional

from invoicedash.database.base import Database
from invoicedash.domain.entities import (
    CardData,
    InvoiceForm,
    InvoicesTableRow,
    LatestInvoice,
)
from invoicedash.domain.errors import (
    CARD_DATA_FETCH_FAILED,
    FILTERED_INVOICES_FETCH_FAILED,
    INVOICE_FETCH_FAILED,
    INVOICE_PAGES_FETCH_FAILED,
    LATEST_INVOICES_FETCH_FAILED,
    FetchError,
)
from invoicedash.domain.presentation import (
    card_data_from_rows,
    invoice_form_from_row,
    invoices_table_row_from_row,
    latest_invoice_from_row,
)
from invoicedash.utils.pagination import ITEMS_PER_PAGE, page_bounds, total_pages

logger = logging.getLogger(__name__)

LATEST_INVOICES_LIMIT = 5


class InvoiceService:
    """Service for reading invoices and invoice aggregates."""

    def __init__(self, db: Database):
        """Initialize invoice service.

        Args:
            db: Database instance
        """
        self.db = db

    def fetch_latest_invoices(self) -> list[LatestInvoice]:
        """Fetch the five most recent invoices with customer details.

        Raises:
            FetchError: If the backend query fails
        """
        try:
            rows = self.db.list_latest_invoices(limit=LATEST_INVOICES_LIMIT)
            return [latest_invoice_from_row(row) for row in rows]
        except Exception as e:
            logger.error("Database Error: %s", e)
            raise FetchError(LATEST_INVOICES_FETCH_FAILED) from None

    def fetch_card_data(self) -> CardData:
        """Fetch customer/invoice counts and paid/pending totals.

        Totals are summed from the fetched rows rather than aggregated
        by the backend.

        Raises:
            FetchError: If either backend query fails
        """
        try:
            invoice_amounts = self.db.list_invoice_amounts()
            customer_ids = self.db.list_customer_ids()
            return card_data_from_rows(invoice_amounts, customer_ids)
        except Exception as e:
            logger.error("Database Error: %s", e)
            raise FetchError(CARD_DATA_FETCH_FAILED) from None

    def fetch_filtered_invoices(self, query: str, current_page: int) -> list[InvoicesTableRow]:
        """Fetch one page of invoices matching a search query.

        Args:
            query: Search text matched against customer name/email, amount,
                date and status. Empty matches everything.
            current_page: 1-based page number

        Raises:
            FetchError: If the backend query fails
        """
        try:
            start, end = page_bounds(current_page)
            rows = self.db.search_invoices(query, offset=start, limit=end - start + 1)
            return [invoices_table_row_from_row(row) for row in rows]
        except Exception as e:
            logger.error("Database Error: %s", e)
            raise FetchError(FILTERED_INVOICES_FETCH_FAILED) from None

    def fetch_invoices_pages(self, query: str) -> int:
        """Return how many pages of ITEMS_PER_PAGE the search query spans.

        Raises:
            FetchError: If the backend query fails
        """
        try:
            count = self.db.count_invoices(query)
            return total_pages(count, ITEMS_PER_PAGE)
        except Exception as e:
            logger.error("Database Error: %s", e)
            raise FetchError(INVOICE_PAGES_FETCH_FAILED) from None

    def fetch_invoice_by_id(self, invoice_id: str) -> Optional[InvoiceForm]:
        """Fetch a single invoice for editing, amount in dollars.

        Returns:
            InvoiceForm or None if no invoice has this ID

        Raises:
            FetchError: If the backend query fails
        """
        try:
            invoice = self.db.get_invoice(invoice_id)
            if invoice is None:
                return None
            return invoice_form_from_row(invoice)
        except Exception as e:
            logger.error("Database Error: %s", e)
            raise FetchError(INVOICE_FETCH_FAILED) from None
