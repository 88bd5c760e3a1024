"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.customer import Customer


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="registerCustomer")
    async def register_customer(
        self, info: strawberry.Info, name: str, age: int, email: str, address: str
    ) -> Customer:
        """Register a new customer."""
        from ..resolvers.customer import register_customer

        return await register_customer(info, name, age, email, address)

    @strawberry.mutation(name="updateCustomerEmail")
    async def update_customer_email(self, info: strawberry.Info, id: str, email: str) -> Customer:
        """Change the email address of an existing customer."""
        from ..resolvers.customer import update_customer_email

        return await update_customer_email(info, id, email)

    @strawberry.mutation(name="deleteCustomer")
    async def delete_customer(self, info: strawberry.Info, id: str) -> bool:
        """Delete a customer."""
        from ..resolvers.customer import delete_customer

        return await delete_customer(info, id)

    @strawberry.mutation(name="destroyCustomers")
    async def destroy_customers(self, info: strawberry.Info) -> int:
        """Delete every customer and return how many were removed."""
        from ..resolvers.customer import destroy_customers

        return await destroy_customers(info)
