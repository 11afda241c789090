"""
Shared loading logic for relational GraphQL fields
"""

from typing import Any, TypeVar

import strawberry
from strawberry.dataloader import DataLoader

from ..config import RelationErrorPolicy, settings
from ..logging import get_logger
from .loaders import Loaders

logger = get_logger(__name__)

T = TypeVar("T")


def get_loaders(info: strawberry.Info) -> Loaders:
    """
    Return the request's loaders, creating them on first use.

    Loaders live in the GraphQL context so their cache never outlives a request.
    """
    loaders = info.context.get("loaders")
    if loaders is None:
        loaders = Loaders()
        info.context["loaders"] = loaders
    return loaders


def get_relation_error_policy(info: strawberry.Info) -> RelationErrorPolicy:
    """Context override first, then the configured default."""
    policy: Any = info.context.get("relation_error_policy") or settings.relation_error_policy
    return RelationErrorPolicy(policy)


async def load_related(
    info: strawberry.Info,
    loader: DataLoader[str, list[T]],
    parent_id: str,
    *,
    relation: str,
) -> list[T]:
    """
    Load the rows related to one parent through a per-request loader.

    Under the MASK policy a failed lookup is logged and resolves to an empty
    list, so sibling fields and the enclosing query still complete.
    """
    try:
        return list(await loader.load(parent_id))
    except Exception as e:
        if get_relation_error_policy(info) is RelationErrorPolicy.RAISE:
            raise
        logger.error(
            "Failed to fetch related rows",
            relation=relation,
            parent_id=parent_id,
            error=str(e),
            error_type=type(e).__name__,
        )
        return []
