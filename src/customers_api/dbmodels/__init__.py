"""
Database models for the Customers API (authoritative ORM definitions).

Defines the SQLAlchemy Base with a naming convention so constraint names are
stable across PostgreSQL and SQLite, and exposes `target_metadata` for schema
bootstrap.
"""

from uuid import UUID

from sqlalchemy import (
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Customers(Base):
    __tablename__ = "customers"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="customers_pkey"),
        UniqueConstraint("email", name="customers_email_key"),
    )

    id: Mapped[UUID] = mapped_column(Uuid)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)


target_metadata = Base.metadata

__all__ = ["Base", "Customers", "target_metadata"]
