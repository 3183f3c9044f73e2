"""
Record definitions for the in-memory entity store
"""

from dataclasses import dataclass
from enum import Enum


class ReferentialPolicy(str, Enum):
    """What happens to cities when the country they reference goes away."""

    ALLOW_DANGLING = "allow_dangling"
    CASCADE = "cascade"
    RESTRICT = "restrict"


@dataclass
class CountryRecord:
    id: int
    name: str


@dataclass
class CityRecord:
    id: int
    name: str
    country_id: int
