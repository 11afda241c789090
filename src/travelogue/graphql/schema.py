"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from .loaders import Loaders
from .queries.root import Query
from .types.enums import SortOrder

logger = get_logger(__name__)

# Mutations are intentionally not part of the schema: the API is read-only.
schema = strawberry.Schema(
    query=Query,
    types=[SortOrder],
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Ensures every type reference resolves so the server fails fast instead
    of erroring on the first request.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


async def get_context(request: Request) -> dict[str, Any]:
    """Get the context for GraphQL resolvers."""
    return {
        "request": request,
        "loaders": Loaders(),
        "relation_error_policy": settings.relation_error_policy,
    }


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=settings.debug,
        context_getter=get_context,
    )
