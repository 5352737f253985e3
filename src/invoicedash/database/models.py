"""SQLAlchemy models for the invoicedash backend tables."""

import uuid

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    Date,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """Dashboard user model."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    email = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)


class Customer(Base):
    """Customer model."""

    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    image_url = Column(String(255), nullable=False)

    # Relationships
    invoices = relationship("Invoice", back_populates="customer")


class Invoice(Base):
    """Invoice model. Amount is stored in cents."""

    __tablename__ = "invoices"

    id = Column(String(36), primary_key=True, default=_new_id)
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False)
    amount = Column(Integer, nullable=False)
    status = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)

    # Relationships
    customer = relationship("Customer", back_populates="invoices")


class Revenue(Base):
    """Monthly revenue model."""

    __tablename__ = "revenue"

    month = Column(String(4), primary_key=True)
    revenue = Column(Integer, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
