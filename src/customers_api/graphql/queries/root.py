"""
Root GraphQL query definitions
"""

import strawberry

from ..types.customer import Customer


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def customer(self, info: strawberry.Info, id: str) -> Customer:
        """Get a customer by ID."""
        from ..resolvers.customer import resolve_customer_by_id

        return await resolve_customer_by_id(info, id)

    @strawberry.field
    async def customers(self, info: strawberry.Info) -> list[Customer]:
        """Get all customers."""
        from ..resolvers.customer import resolve_customers

        return await resolve_customers(info)
