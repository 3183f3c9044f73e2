"""
In-memory entity store holding the country and city collections
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import Generic, Protocol, TypeVar

from ..logging import get_logger
from .models import CityRecord, CountryRecord, ReferentialPolicy

logger = get_logger(__name__)


class _HasId(Protocol):
    id: int


R = TypeVar("R", bound=_HasId)


class Collection(Generic[R]):
    """An insertion-ordered list of records with a monotonic id counter.

    Ids handed out by ``next_id`` are never reused, even after the record
    that carried the highest id has been removed.
    """

    def __init__(self, name: str, records: Iterable[R] = ()) -> None:
        self.name = name
        self._records: list[R] = list(records)
        self._last_id = max((record.id for record in self._records), default=0)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(list(self._records))

    def all(self) -> list[R]:
        return list(self._records)

    def find(self, predicate: Callable[[R], bool]) -> R | None:
        for record in self._records:
            if predicate(record):
                return record
        return None

    def find_index(self, predicate: Callable[[R], bool]) -> int | None:
        for index, record in enumerate(self._records):
            if predicate(record):
                return index
        return None

    def filter(self, predicate: Callable[[R], bool]) -> list[R]:
        return [record for record in self._records if predicate(record)]

    def get(self, id: int) -> R | None:
        return self.find(lambda record: record.id == id)

    def index_of(self, id: int) -> int | None:
        return self.find_index(lambda record: record.id == id)

    def next_id(self) -> int:
        """Reserve and return the next unused id."""
        self._last_id += 1
        return self._last_id

    def append(self, record: R) -> None:
        self._records.append(record)
        self._last_id = max(self._last_id, record.id)

    def remove_at(self, index: int) -> R:
        return self._records.pop(index)

    def replace_at(self, index: int, record: R) -> None:
        self._records[index] = record


class EntityStore:
    """Countries and cities for one process.

    Mutations must run inside ``transaction()``, which serializes writers on a
    single lock. Reads do not lock.
    """

    def __init__(
        self,
        countries: Iterable[CountryRecord] = (),
        cities: Iterable[CityRecord] = (),
        referential_policy: ReferentialPolicy = ReferentialPolicy.ALLOW_DANGLING,
    ) -> None:
        self.countries: Collection[CountryRecord] = Collection("countries", countries)
        self.cities: Collection[CityRecord] = Collection("cities", cities)
        self.referential_policy = ReferentialPolicy(referential_policy)
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[EntityStore]:
        with self._lock:
            yield self

    def cities_of(self, country_id: int) -> list[CityRecord]:
        return self.cities.filter(lambda city: city.country_id == country_id)

    def stats(self) -> dict[str, int]:
        return {collection.name: len(collection) for collection in (self.countries, self.cities)}
