"""
Main GraphQL schema definition using Strawberry
"""

import strawberry
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..config import settings
from ..errors import FetchError
from ..logging import get_logger
from ..models import check_entity_models
from .context import RequestContext, get_context
from .queries.root import Query
from .resolvers import RESOLVERS

logger = get_logger(__name__)


class Schema(strawberry.Schema):
    """Strawberry schema that logs field errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, FetchError):
                logger.warning(
                    "Field resolution failed",
                    path=error.path,
                    code=original.code,
                    url=original.url,
                    error=str(original),
                )
            else:
                logger.error(
                    "GraphQL error",
                    path=error.path,
                    error=str(error),
                    exc_info=original,
                )


# Create the GraphQL schema
schema = Schema(query=Query)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Checks the schema structure, runs an introspection query, and verifies
    that every exposed entity field is backed either by a resolver or by a
    compatible backing record field.

    Raises:
        Exception: If the schema is invalid
        ModelMismatchError: If an exposed field cannot be satisfied
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        check_entity_models(graphql_schema, RESOLVERS.keys())

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router() -> GraphQLRouter[RequestContext, None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )


def print_schema() -> str:
    """Render the schema as SDL."""
    return schema.as_str()


__all__ = ["schema", "validate_schema", "create_graphql_router", "print_schema"]
