"""One-shot population of the backend with placeholder data."""

import logging
from datetime import date
from typing import Any, Optional, Sequence

import bcrypt

from invoicedash.database.base import Database
from invoicedash.domain.entities import InvoiceStatus
from invoicedash.domain.errors import SeedError, seed_phase_failed
from invoicedash.seed import placeholder_data

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10

Rows = Sequence[dict[str, Any]]


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password with bcrypt."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


class Seeder:
    """Inserts placeholder rows table by table.

    Each phase stops at its first failed insert and raises SeedError.
    """

    def __init__(
        self,
        db: Database,
        users: Optional[Rows] = None,
        customers: Optional[Rows] = None,
        invoices: Optional[Rows] = None,
        revenue: Optional[Rows] = None,
        bcrypt_rounds: int = BCRYPT_ROUNDS,
    ):
        self.db = db
        self.users = placeholder_data.USERS if users is None else users
        self.customers = placeholder_data.CUSTOMERS if customers is None else customers
        self.invoices = placeholder_data.INVOICES if invoices is None else invoices
        self.revenue = placeholder_data.REVENUE if revenue is None else revenue
        self.bcrypt_rounds = bcrypt_rounds

    def seed_users(self) -> int:
        try:
            for user in self.users:
                self.db.insert_user(
                    user_id=user["id"],
                    name=user["name"],
                    email=user["email"],
                    password_hash=hash_password(user["password"], self.bcrypt_rounds),
                )
        except Exception as e:
            logger.error("Error seeding users: %s", e)
            raise SeedError(seed_phase_failed("users")) from e
        logger.info("Seeded users")
        return len(self.users)

    def seed_customers(self) -> int:
        try:
            for customer in self.customers:
                self.db.insert_customer(
                    customer_id=customer["id"],
                    name=customer["name"],
                    email=customer["email"],
                    image_url=customer["image_url"],
                )
        except Exception as e:
            logger.error("Error seeding customers: %s", e)
            raise SeedError(seed_phase_failed("customers")) from e
        logger.info("Seeded customers")
        return len(self.customers)

    def seed_invoices(self) -> int:
        try:
            for invoice in self.invoices:
                invoice_date = invoice["date"]
                if isinstance(invoice_date, str):
                    invoice_date = date.fromisoformat(invoice_date)
                self.db.insert_invoice(
                    customer_id=invoice["customer_id"],
                    amount=invoice["amount"],
                    status=InvoiceStatus(invoice["status"]),
                    date=invoice_date,
                )
        except Exception as e:
            logger.error("Error seeding invoices: %s", e)
            raise SeedError(seed_phase_failed("invoices")) from e
        logger.info("Seeded invoices")
        return len(self.invoices)

    def seed_revenue(self) -> int:
        try:
            for rev in self.revenue:
                self.db.insert_revenue(month=rev["month"], revenue=rev["revenue"])
        except Exception as e:
            logger.error("Error seeding revenue: %s", e)
            raise SeedError(seed_phase_failed("revenue")) from e
        logger.info("Seeded revenue")
        return len(self.revenue)

    def run(self) -> dict[str, int]:
        """Run every phase in order. Returns rows inserted per table.

        Raises:
            SeedError: On the first failed phase; later phases are skipped
        """
        counts = {}
        try:
            counts["users"] = self.seed_users()
            counts["customers"] = self.seed_customers()
            counts["invoices"] = self.seed_invoices()
            counts["revenue"] = self.seed_revenue()
        except SeedError as e:
            logger.error("An error occurred while attempting to seed the database: %s", e)
            raise
        return counts


def seed_database(db: Database) -> dict[str, int]:
    """Seed a backend with the bundled placeholder data."""
    return Seeder(db).run()
