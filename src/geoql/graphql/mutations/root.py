"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.city import City
from ..types.country import Country
from ..types.deletion import DeletedConfirmation


@strawberry.type(description="Root Mutation")
class Mutation:
    """Root GraphQL mutation type."""

    # City mutations
    @strawberry.mutation(name="addCity", description="Add a city")
    async def add_city(self, info: strawberry.Info, name: str, country_id: int) -> City | None:
        from ..resolvers.city import add_city

        return await add_city(info, name, country_id)

    @strawberry.mutation(name="updateCity", description="Update a city")
    async def update_city(
        self, info: strawberry.Info, id: int, name: str, country_id: int
    ) -> City | None:
        from ..resolvers.city import update_city

        return await update_city(info, id, name, country_id)

    @strawberry.mutation(name="deleteCity", description="Delete a city")
    async def delete_city(self, info: strawberry.Info, id: int) -> DeletedConfirmation | None:
        from ..resolvers.city import delete_city

        return await delete_city(info, id)

    # Country mutations
    @strawberry.mutation(name="addCountries", description="Add a country")
    async def add_countries(self, info: strawberry.Info, name: str) -> Country | None:
        from ..resolvers.country import add_country

        return await add_country(info, name)

    @strawberry.mutation(name="updateCountry", description="Update a country")
    async def update_country(self, info: strawberry.Info, id: int, name: str) -> Country | None:
        from ..resolvers.country import update_country

        return await update_country(info, id, name)

    @strawberry.mutation(name="deleteCountry", description="Delete a country")
    async def delete_country(self, info: strawberry.Info, id: int) -> DeletedConfirmation | None:
        from ..resolvers.country import delete_country

        return await delete_country(info, id)
