"""User domain service."""

import logging
from typing import Optional

from invoicedash.database.base import Database
from invoicedash.domain.entities import User
from invoicedash.domain.errors import FetchError, USER_FETCH_FAILED

logger = logging.getLogger(__name__)


class UserService:
    """Service for looking up users."""

    def __init__(self, db: Database):
        self.db = db

    def get_user(self, email: str) -> Optional[User]:
        """Get user by email, or None if no user has this email.

        Raises:
            FetchError: If the backend query fails
        """
        try:
            return self.db.get_user_by_email(email)
        except Exception as e:
            logger.error("Failed to fetch user: %s", e)
            raise FetchError(USER_FETCH_FAILED) from None
