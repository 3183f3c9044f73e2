"""
Conversion from store records to GraphQL types
"""

from __future__ import annotations

from ...database import CityRecord, CountryRecord
from ..types.city import City
from ..types.country import Country


def to_city(record: CityRecord) -> City:
    return City(id=record.id, name=record.name, country_id=record.country_id)


def to_country(record: CountryRecord) -> Country:
    return Country(id=record.id, name=record.name)
