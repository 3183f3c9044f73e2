from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import strawberry

from ...database import CityRecord, EntityStore, ReferentialPolicy
from ...logging import get_logger
from ..context import get_store_from_info
from ..errors import NotFoundError
from .convert import to_city, to_country

if TYPE_CHECKING:
    from ..types.city import City
    from ..types.country import Country
    from ..types.deletion import DeletedConfirmation

logger = get_logger(__name__)


def _ensure_country_exists(store: EntityStore, country_id: int) -> None:
    """Reject unknown country ids when the store enforces references."""
    if store.referential_policy is not ReferentialPolicy.RESTRICT:
        return
    if store.countries.get(country_id) is None:
        logger.info("Referenced country not found", country_id=country_id)
        raise NotFoundError("Country", country_id)


# Query resolvers
async def resolve_city_by_id(info: strawberry.Info, id: int | None) -> City | None:
    """Resolve a single city; a missing id or unknown id yields None."""
    if id is None:
        return None

    store = get_store_from_info(info)
    record = store.cities.get(id)
    if record is None:
        logger.debug("City not found", city_id=id)
        return None

    return to_city(record)


async def resolve_cities(info: strawberry.Info) -> list[City]:
    store = get_store_from_info(info)
    return [to_city(record) for record in store.cities]


# Field resolvers
async def resolve_city_country(city: City, info: strawberry.Info) -> Country | None:
    """
    Resolve the country a city points at.

    Returns None when the country has been deleted and the city was left
    dangling.
    """
    store = get_store_from_info(info)
    record = store.countries.get(city.country_id)
    if record is None:
        logger.debug("Dangling country reference", city_id=city.id, country_id=city.country_id)
        return None
    return to_country(record)


# Mutation resolvers
async def add_city(info: strawberry.Info, name: str, country_id: int) -> City:
    store = get_store_from_info(info)

    with store.transaction():
        _ensure_country_exists(store, country_id)
        record = CityRecord(id=store.cities.next_id(), name=name, country_id=country_id)
        store.cities.append(record)

    logger.info("City created", city_id=record.id, name=name, country_id=country_id)
    return to_city(record)


async def update_city(info: strawberry.Info, id: int, name: str, country_id: int) -> City:
    """
    Replace the name and country of an existing city.

    The id and the city's position in the collection are preserved.
    """
    store = get_store_from_info(info)

    with store.transaction():
        index = store.cities.index_of(id)
        if index is None:
            logger.info("City not found", city_id=id)
            raise NotFoundError("City", id)
        _ensure_country_exists(store, country_id)

        record = dataclasses.replace(
            store.cities.all()[index], name=name, country_id=country_id
        )
        store.cities.replace_at(index, record)

    logger.info("City updated", city_id=id, name=name, country_id=country_id)
    return to_city(record)


async def delete_city(info: strawberry.Info, id: int) -> DeletedConfirmation:
    from ..types.deletion import DeletedConfirmation as DeletedConfirmationType

    store = get_store_from_info(info)

    with store.transaction():
        index = store.cities.index_of(id)
        if index is None:
            logger.info("City not found", city_id=id)
            raise NotFoundError("City", id)
        removed = store.cities.remove_at(index)

    logger.info("City deleted", city_id=removed.id, name=removed.name)
    return DeletedConfirmationType(id=removed.id, message=f"Deleted city: {removed.name}")
