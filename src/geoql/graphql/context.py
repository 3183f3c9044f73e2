"""
Helpers for reading per-request state out of the GraphQL execution context
"""

from typing import Any

import strawberry

from ..database import EntityStore


def get_store_from_info(info: strawberry.Info) -> EntityStore:
    """Return the entity store the request was executed against.

    The context is a plain dict built by ``create_graphql_router`` (or passed
    as ``context_value`` when executing the schema directly).
    """
    context: Any = info.context
    store = context.get("store") if isinstance(context, dict) else getattr(context, "store", None)
    if store is None:
        raise RuntimeError("No entity store in GraphQL context")
    return store
