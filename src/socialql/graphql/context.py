"""
Helpers for reading the per-request GraphQL context
"""

from typing import Any

import strawberry

from ..store import EntityStore


def build_context(request: Any, store: EntityStore) -> dict[str, Any]:
    """Context dict handed to every resolver."""
    return {
        "request": request,
        "store": store,
    }


def get_store_from_info(info: strawberry.Info) -> EntityStore:
    """Return the entity store bound to the running schema."""
    store = info.context.get("store") if isinstance(info.context, dict) else None
    if store is None:
        raise RuntimeError("Entity store missing from GraphQL context")
    return store
