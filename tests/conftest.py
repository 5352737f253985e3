"""Shared pytest fixtures for invoicedash tests."""

import tempfile
import os
import pytest

from invoicedash.database.factories import create_sqlite_database
from invoicedash.domain.customer import CustomerService
from invoicedash.domain.invoice import InvoiceService
from invoicedash.domain.revenue import RevenueService
from invoicedash.domain.user import UserService
from invoicedash.seed import Seeder


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def seeded_db(temp_db):
    """Temporary database populated with the placeholder data."""
    # Low bcrypt cost keeps the suite fast
    Seeder(temp_db, bcrypt_rounds=4).run()
    return temp_db


@pytest.fixture
def invoice_service(seeded_db):
    """Create an InvoiceService over the seeded database."""
    return InvoiceService(seeded_db)


@pytest.fixture
def customer_service(seeded_db):
    """Create a CustomerService over the seeded database."""
    return CustomerService(seeded_db)


@pytest.fixture
def revenue_service(seeded_db):
    """Create a RevenueService with no simulated latency."""
    return RevenueService(seeded_db, delay=0)


@pytest.fixture
def user_service(seeded_db):
    """Create a UserService over the seeded database."""
    return UserService(seeded_db)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def no_revenue_delay(monkeypatch):
    """Disable the simulated revenue latency for CLI invocations."""
    monkeypatch.setenv("INVOICEDASH_REVENUE_DELAY", "0")
    monkeypatch.delenv("INVOICEDASH_DATABASE_URL", raising=False)
