"""
Customer GraphQL type definitions
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Customers


@strawberry.type
class Customer:
    """Customer type for GraphQL API."""

    id: str
    name: str
    age: int
    email: str
    address: str

    @classmethod
    def from_model(cls, row: Customers) -> Customer:
        return cls(
            id=str(row.id),
            name=row.name,
            age=row.age,
            email=row.email,
            address=row.address,
        )
