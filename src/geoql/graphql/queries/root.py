"""
Root GraphQL query definitions
"""

import strawberry

from ..types.city import City
from ..types.country import Country


@strawberry.type(description="Root Query")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="A Single City")
    async def city(
        self, info: strawberry.Info, id: int | None = strawberry.UNSET
    ) -> City | None:
        from ..resolvers.city import resolve_city_by_id

        return await resolve_city_by_id(info, None if id is strawberry.UNSET else id)

    @strawberry.field(description="List of All Cities")
    async def cities(self, info: strawberry.Info) -> list[City]:
        from ..resolvers.city import resolve_cities

        return await resolve_cities(info)

    @strawberry.field(description="A Single Country")
    async def country(
        self, info: strawberry.Info, id: int | None = strawberry.UNSET
    ) -> Country | None:
        from ..resolvers.country import resolve_country_by_id

        return await resolve_country_by_id(info, None if id is strawberry.UNSET else id)

    @strawberry.field(description="List of All Countries")
    async def countries(self, info: strawberry.Info) -> list[Country]:
        from ..resolvers.country import resolve_countries

        return await resolve_countries(info)
