"""
City GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .country import Country


@strawberry.type(description="This represents a city represented by a country")
class City:
    """City type for GraphQL API."""

    id: int
    name: str
    country_id: int

    @strawberry.field(description="The country this city belongs to")
    async def country(
        self, info: strawberry.Info
    ) -> Annotated["Country", strawberry.lazy(".country")] | None:
        """Get the country for this city, or None if it no longer exists."""
        from ..resolvers.city import resolve_city_country

        return await resolve_city_country(self, info)
