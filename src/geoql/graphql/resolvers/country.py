from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import strawberry

from ...database import CountryRecord, ReferentialPolicy
from ...logging import get_logger
from ..context import get_store_from_info
from ..errors import NotFoundError, ReferenceConflictError
from .convert import to_city, to_country

if TYPE_CHECKING:
    from ..types.city import City
    from ..types.country import Country
    from ..types.deletion import DeletedConfirmation

logger = get_logger(__name__)


# Query resolvers
async def resolve_country_by_id(info: strawberry.Info, id: int | None) -> Country | None:
    """Resolve a single country; a missing id or unknown id yields None."""
    if id is None:
        return None

    store = get_store_from_info(info)
    record = store.countries.get(id)
    if record is None:
        logger.debug("Country not found", country_id=id)
        return None

    return to_country(record)


async def resolve_countries(info: strawberry.Info) -> list[Country]:
    store = get_store_from_info(info)
    return [to_country(record) for record in store.countries]


# Field resolvers
async def resolve_country_cities(country: Country, info: strawberry.Info) -> list[City]:
    """Scan the city collection for cities referencing this country."""
    store = get_store_from_info(info)
    return [to_city(record) for record in store.cities_of(country.id)]


# Mutation resolvers
async def add_country(info: strawberry.Info, name: str) -> Country:
    store = get_store_from_info(info)

    with store.transaction():
        record = CountryRecord(id=store.countries.next_id(), name=name)
        store.countries.append(record)

    logger.info("Country created", country_id=record.id, name=name)
    return to_country(record)


async def update_country(info: strawberry.Info, id: int, name: str) -> Country:
    """Rename an existing country. Its id and cities are untouched."""
    store = get_store_from_info(info)

    with store.transaction():
        index = store.countries.index_of(id)
        if index is None:
            logger.info("Country not found", country_id=id)
            raise NotFoundError("Country", id)

        record = dataclasses.replace(store.countries.all()[index], name=name)
        store.countries.replace_at(index, record)

    logger.info("Country updated", country_id=id, name=name)
    return to_country(record)


async def delete_country(info: strawberry.Info, id: int) -> DeletedConfirmation:
    """
    Delete a country.

    Dependent cities are handled according to the store's referential policy:
    left dangling, removed along with the country, or protecting the country
    from deletion.
    """
    from ..types.deletion import DeletedConfirmation as DeletedConfirmationType

    store = get_store_from_info(info)
    cascaded_ids: list[int] = []

    with store.transaction():
        index = store.countries.index_of(id)
        if index is None:
            logger.info("Country not found", country_id=id)
            raise NotFoundError("Country", id)

        dependents = store.cities_of(id)
        policy = store.referential_policy

        if dependents and policy is ReferentialPolicy.RESTRICT:
            country_name = store.countries.all()[index].name
            logger.info(
                "Country still referenced",
                country_id=id,
                city_ids=[city.id for city in dependents],
            )
            raise ReferenceConflictError(country_name, [city.id for city in dependents])

        removed = store.countries.remove_at(index)

        if policy is ReferentialPolicy.CASCADE:
            for city in dependents:
                city_index = store.cities.index_of(city.id)
                if city_index is not None:
                    store.cities.remove_at(city_index)
                    cascaded_ids.append(city.id)

    logger.info(
        "Country deleted",
        country_id=removed.id,
        name=removed.name,
        referential_policy=policy.value,
        cascaded_city_ids=cascaded_ids,
        dangling_city_ids=(
            [city.id for city in dependents]
            if policy is ReferentialPolicy.ALLOW_DANGLING
            else []
        ),
    )
    return DeletedConfirmationType(
        id=removed.id,
        message=f"Deleted country: {removed.name}",
        cascaded_ids=cascaded_ids,
    )
