"""Repository helpers for the customers table."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Customers


async def get_customer(session: AsyncSession, customer_id: UUID) -> Customers | None:
    stmt = select(Customers).where(Customers.id == customer_id)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


async def list_customers(session: AsyncSession) -> Sequence[Customers]:
    stmt = select(Customers).order_by(Customers.name, Customers.id)
    res = await session.execute(stmt)
    return res.scalars().all()


async def insert_customer(
    session: AsyncSession,
    *,
    customer_id: UUID,
    name: str,
    age: int,
    email: str,
    address: str,
) -> None:
    stmt = insert(Customers).values(
        id=customer_id,
        name=name,
        age=age,
        email=email,
        address=address,
    )
    await session.execute(stmt)


async def update_customer_email(session: AsyncSession, customer_id: UUID, email: str) -> int:
    """Set a customer's email. Returns the number of rows updated (0 or 1)."""
    stmt = (
        update(Customers)
        .where(Customers.id == customer_id)
        .values(email=email)
        .execution_options(synchronize_session=False)
    )
    res = await session.execute(stmt)
    return res.rowcount


async def delete_customer(session: AsyncSession, customer_id: UUID) -> int:
    """Delete one customer. Returns the number of rows deleted (0 or 1)."""
    stmt = (
        delete(Customers)
        .where(Customers.id == customer_id)
        .execution_options(synchronize_session=False)
    )
    res = await session.execute(stmt)
    return res.rowcount


async def delete_all_customers(session: AsyncSession) -> int:
    """Delete every customer in one statement. Returns the number of rows deleted."""
    stmt = delete(Customers).execution_options(synchronize_session=False)
    res = await session.execute(stmt)
    return res.rowcount
