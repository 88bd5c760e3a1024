from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import strawberry

from ...customers import repository
from ...errors import CustomerNotFound, InvalidArgument
from ...logging import get_logger

if TYPE_CHECKING:
    from ...database import Database
    from ..types.customer import Customer

logger = get_logger(__name__)

# Store column is a 32-bit INTEGER
MAX_AGE = 2**31 - 1


def get_database(info: strawberry.Info) -> Database:
    """Return the store handle the request context was built with."""
    database = info.context.get("db")
    if database is None:
        raise RuntimeError("Database handle missing from GraphQL context")
    return database


def parse_customer_id(id: str) -> uuid.UUID:
    """Parse an externally supplied customer id."""
    try:
        return uuid.UUID(id)
    except (ValueError, AttributeError, TypeError) as e:
        raise InvalidArgument(f"invalid customer id: {id!r}") from e


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _require_text(field: str, value: str) -> str:
    if not value or not value.strip():
        raise InvalidArgument(f"{field} must not be empty")
    return value


def _validate_age(age: int) -> int:
    if age < 0 or age > MAX_AGE:
        raise InvalidArgument(f"age must be between 0 and {MAX_AGE}")
    return age


# Query resolvers
async def resolve_customer_by_id(info: strawberry.Info, id: str) -> Customer:
    """Resolve a single customer by its id."""
    customer_id = parse_customer_id(id)

    async with get_database(info).session() as session:
        row = await repository.get_customer(session, customer_id)

        if row is None:
            logger.info("Customer not found", customer_id=str(customer_id))
            raise CustomerNotFound()

        from ..types.customer import Customer as CustomerType

        return CustomerType.from_model(row)


async def resolve_customers(info: strawberry.Info) -> list[Customer]:
    """Resolve every customer, ordered by name then id."""
    async with get_database(info).session() as session:
        rows = await repository.list_customers(session)

        from ..types.customer import Customer as CustomerType

        return [CustomerType.from_model(row) for row in rows]


# Mutation resolvers
async def register_customer(
    info: strawberry.Info, name: str, age: int, email: str, address: str
) -> Customer:
    """
    Register a new customer.

    The id is generated here and the email is stored lowercased.
    """
    name = _require_text("name", name)
    age = _validate_age(age)
    email = normalize_email(_require_text("email", email))
    address = _require_text("address", address)
    customer_id = uuid.uuid4()

    async with get_database(info).session() as session:
        await repository.insert_customer(
            session,
            customer_id=customer_id,
            name=name,
            age=age,
            email=email,
            address=address,
        )

    logger.info("Customer registered", customer_id=str(customer_id))

    from ..types.customer import Customer as CustomerType

    return CustomerType(
        id=str(customer_id),
        name=name,
        age=age,
        email=email,
        address=address,
    )


async def update_customer_email(info: strawberry.Info, id: str, email: str) -> Customer:
    """
    Change a customer's email and return the stored record.

    Raises CustomerNotFound when no row matches the id.
    """
    customer_id = parse_customer_id(id)
    email = normalize_email(_require_text("email", email))

    async with get_database(info).session() as session:
        updated = await repository.update_customer_email(session, customer_id, email)
        if updated == 0:
            raise CustomerNotFound()

        row = await repository.get_customer(session, customer_id)
        if row is None:
            raise CustomerNotFound()

        logger.info("Customer email updated", customer_id=str(customer_id))

        from ..types.customer import Customer as CustomerType

        return CustomerType.from_model(row)


async def delete_customer(info: strawberry.Info, id: str) -> bool:
    """Delete a customer. Raises CustomerNotFound when no row matches the id."""
    customer_id = parse_customer_id(id)

    async with get_database(info).session() as session:
        deleted = await repository.delete_customer(session, customer_id)
        if deleted == 0:
            raise CustomerNotFound()

    logger.info("Customer deleted", customer_id=str(customer_id))
    return True


async def destroy_customers(info: strawberry.Info) -> int:
    """Delete every customer in a single statement and return how many were removed."""
    async with get_database(info).session() as session:
        count = await repository.delete_all_customers(session)

    logger.warning("All customers destroyed", count=count)
    return count
