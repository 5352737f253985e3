"""Credential checking for dashboard sign-in."""

import logging
from typing import Any, Mapping, Optional

import bcrypt
from pydantic import BaseModel, EmailStr, Field
from pydantic import ValidationError as SchemaValidationError

from invoicedash.database.base import Database
from invoicedash.domain.entities import User
from invoicedash.domain.user import UserService

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class Credentials(BaseModel):
    """Shape of a sign-in attempt."""

    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)


def parse_credentials(credentials: Mapping[str, Any]) -> Optional[Credentials]:
    """Validate raw sign-in input, returning None when it is malformed."""
    try:
        return Credentials.model_validate(dict(credentials))
    except SchemaValidationError as e:
        logger.info("Rejected credentials: %d validation error(s)", e.error_count())
        return None


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain-text password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def authorize(db: Database, credentials: Mapping[str, Any]) -> Optional[User]:
    """Return the user for valid credentials, otherwise None.

    Malformed input, an unknown email and a wrong password are all
    denied the same way.

    Raises:
        FetchError: If the user lookup fails
    """
    parsed = parse_credentials(credentials)
    if parsed is None:
        return None

    # EmailStr lowercases the domain part; stored addresses are matched as typed
    user = UserService(db).get_user(credentials["email"])
    if user is None:
        logger.info("Invalid credentials")
        return None

    if not verify_password(parsed.password, user.password):
        logger.info("Invalid credentials")
        return None

    return user
