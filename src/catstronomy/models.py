"""
Backing record shapes returned by the track catalogue REST API

Each exposed GraphQL entity is registered against the pydantic model that
describes what the remote resource actually sends for it. Fields such as
``Track.author`` exist only as a foreign-key scalar (``authorId``) on the
wire and are produced by a resolver instead.
"""

from collections.abc import Iterable
from types import MappingProxyType, NoneType
from typing import Any, get_args

from graphql import GraphQLNonNull, GraphQLObjectType, GraphQLSchema
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .errors import ModelMismatchError


class BackingRecord(BaseModel):
    """Base for records decoded from the remote resource.

    Records are frozen so resolvers cannot mutate the parent they receive.
    Attributes the remote sends but we do not declare are kept as extras.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    id: str


class TrackModel(BackingRecord):
    title: str
    author_id: str | None = None
    thumbnail: str | None = None
    length: int | None = None
    modules_count: int | None = None
    description: str | None = None
    number_of_views: int | None = None


class AuthorModel(BackingRecord):
    name: str
    photo: str | None = None


class ModuleModel(BackingRecord):
    title: str
    length: int | None = None
    content: str | None = None
    video_url: str | None = None


# Exposed entity name -> backing record shape
ENTITY_MODELS: MappingProxyType[str, type[BackingRecord]] = MappingProxyType(
    {
        "Track": TrackModel,
        "Author": AuthorModel,
        "Module": ModuleModel,
    }
)


def _wire_fields(model: type[BackingRecord]) -> dict[str, Any]:
    return {info.alias or name: info for name, info in model.model_fields.items()}


def check_entity_models(
    graphql_schema: GraphQLSchema,
    resolver_keys: Iterable[tuple[str, str]],
    entity_models: MappingProxyType[str, type[BackingRecord]] = ENTITY_MODELS,
) -> None:
    """Verify every exposed field is satisfiable before serving traffic.

    A field is satisfied either by an explicit resolver binding or by a
    backing field with the same wire name and compatible nullability.

    Raises:
        ModelMismatchError: listing every problem found
    """
    bound = set(resolver_keys)
    problems: list[str] = []

    for entity, model in entity_models.items():
        gql_type = graphql_schema.get_type(entity)
        if not isinstance(gql_type, GraphQLObjectType):
            problems.append(f"{entity} is registered but not an object type in the schema")
            continue

        backing = _wire_fields(model)
        for field_name, field in gql_type.fields.items():
            if (entity, field_name) in bound:
                continue
            info = backing.get(field_name)
            if info is None:
                problems.append(
                    f"{entity}.{field_name} has no resolver and no field on {model.__name__}"
                )
                continue
            if isinstance(field.type, GraphQLNonNull) and (
                not info.is_required() or NoneType in get_args(info.annotation)
            ):
                problems.append(
                    f"{entity}.{field_name} is non-null but optional on {model.__name__}"
                )

    query_type = graphql_schema.query_type
    if query_type is not None:
        for field_name in query_type.fields:
            if (query_type.name, field_name) not in bound:
                problems.append(f"{query_type.name}.{field_name} has no resolver")

    for entity, field_name in sorted(bound):
        gql_type = graphql_schema.get_type(entity)
        if not isinstance(gql_type, GraphQLObjectType) or field_name not in gql_type.fields:
            problems.append(f"Resolver bound to unknown field {entity}.{field_name}")

    if problems:
        raise ModelMismatchError(problems)
