"""
Country GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .city import City


@strawberry.type(description="This represents a country of a city")
class Country:
    """Country type for GraphQL API."""

    id: int
    name: str

    @strawberry.field(description="Cities located in this country")
    async def cities(
        self, info: strawberry.Info
    ) -> list[Annotated["City", strawberry.lazy(".city")]]:
        """Get cities of this country, in insertion order."""
        from ..resolvers.country import resolve_country_cities

        return await resolve_country_cities(self, info)
