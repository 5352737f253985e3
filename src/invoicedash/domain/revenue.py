"""Revenue domain service."""

import logging
import time

from invoicedash.config import DEFAULT_REVENUE_DELAY_SECONDS
from invoicedash.database.base import Database
from invoicedash.domain.entities import Revenue
from invoicedash.domain.errors import FetchError, REVENUE_FETCH_FAILED

logger = logging.getLogger(__name__)


class RevenueService:
    """Service for reading monthly revenue."""

    def __init__(self, db: Database, delay: float = DEFAULT_REVENUE_DELAY_SECONDS):
        """Initialize revenue service.

        Args:
            db: Database instance
            delay: Seconds to wait before querying, simulating a slow backend
                for loading-state demos. 0 disables it.
        """
        self.db = db
        self.delay = delay

    def fetch_revenue(self) -> list[Revenue]:
        """Fetch all monthly revenue rows.

        Raises:
            FetchError: If the backend query fails
        """
        try:
            logger.info("Fetching revenue data...")
            if self.delay > 0:
                time.sleep(self.delay)

            data = self.db.list_revenue()

            logger.info("Data fetch completed after %g seconds.", self.delay)
            return data
        except Exception as e:
            logger.error("Database Error: %s", e)
            raise FetchError(REVENUE_FETCH_FAILED) from None
