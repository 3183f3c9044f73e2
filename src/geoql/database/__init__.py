"""
In-memory storage for GeoQL
"""

from .models import CityRecord, CountryRecord, ReferentialPolicy
from .seed_data import create_store, seed_initial_data
from .store import Collection, EntityStore

__all__ = [
    "CityRecord",
    "Collection",
    "CountryRecord",
    "EntityStore",
    "ReferentialPolicy",
    "create_store",
    "seed_initial_data",
]
