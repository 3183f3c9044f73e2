"""
Domain errors raised by resolvers.

Strawberry reports an exception raised from a resolver as an error entry on
the response, carrying ``str(exc)`` as its message.
"""


class GeoQLError(Exception):
    """Base class for errors surfaced to GraphQL clients."""


class NotFoundError(GeoQLError):
    """The requested record does not exist."""

    def __init__(self, entity: str, id: int | None = None):
        self.entity = entity
        self.id = id
        super().__init__(f"{entity} not found")


class ReferenceConflictError(GeoQLError):
    """A country cannot be deleted while cities still reference it."""

    def __init__(self, country_name: str, city_ids: list[int]):
        self.country_name = country_name
        self.city_ids = city_ids
        noun = "city" if len(city_ids) == 1 else "cities"
        super().__init__(
            f"Country {country_name} is still referenced by {len(city_ids)} {noun}"
        )
