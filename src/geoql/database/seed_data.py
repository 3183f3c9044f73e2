"""
Seed data and store construction.

The seed mirrors the records the service has always started with: three
countries and two cities in each.
"""

from __future__ import annotations

from ..logging import get_logger
from .models import CityRecord, CountryRecord, ReferentialPolicy
from .store import EntityStore

logger = get_logger(__name__)

INITIAL_COUNTRIES: tuple[tuple[int, str], ...] = (
    (1, "United States"),
    (2, "France"),
    (3, "Japan"),
)

INITIAL_CITIES: tuple[tuple[int, str, int], ...] = (
    (1, "New York City", 1),
    (2, "Paris", 2),
    (3, "Tokyo", 3),
    (4, "Los Angeles", 1),
    (5, "Marseille", 2),
    (6, "Osaka", 3),
)


def seed_initial_data(store: EntityStore) -> None:
    """
    Load the initial countries and cities into an empty store.

    Args:
        store: Store to populate

    Raises:
        RuntimeError: If the store already holds records
    """
    if len(store.countries) or len(store.cities):
        raise RuntimeError("Refusing to seed a non-empty store")

    with store.transaction():
        for id, name in INITIAL_COUNTRIES:
            store.countries.append(CountryRecord(id=id, name=name))
        for id, name, country_id in INITIAL_CITIES:
            store.cities.append(CityRecord(id=id, name=name, country_id=country_id))

    logger.info("Store seeded", **store.stats())


def create_store(
    *,
    referential_policy: ReferentialPolicy = ReferentialPolicy.ALLOW_DANGLING,
    seed: bool = True,
) -> EntityStore:
    """Create a fresh store, seeded unless ``seed`` is False."""
    store = EntityStore(referential_policy=referential_policy)
    if seed:
        seed_initial_data(store)
    logger.debug(
        "Entity store created",
        referential_policy=store.referential_policy.value,
        seeded=seed,
    )
    return store
