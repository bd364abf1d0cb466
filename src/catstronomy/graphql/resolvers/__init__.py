"""
Resolver map binding exposed GraphQL fields to resolution functions

Fields without an entry are read straight off the backing record by
Strawberry's default resolver; ``check_entity_models`` verifies at startup
that doing so is valid.
"""

from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType
from typing import Any

import strawberry

from ..context import RequestContext
from .query import resolve_module, resolve_track, resolve_tracks_for_home
from .track import resolve_track_author, resolve_track_modules

Resolver = Callable[[Any, Mapping[str, Any], RequestContext], Awaitable[Any]]

# (exposed entity, GraphQL field name) -> resolver
RESOLVERS: Mapping[tuple[str, str], Resolver] = MappingProxyType(
    {
        ("Query", "tracksForHome"): resolve_tracks_for_home,
        ("Query", "track"): resolve_track,
        ("Query", "module"): resolve_module,
        ("Track", "author"): resolve_track_author,
        ("Track", "modules"): resolve_track_modules,
    }
)


async def resolve(
    entity: str,
    field: str,
    parent: Any,
    arguments: Mapping[str, Any],
    info: strawberry.Info,
) -> Any:
    """Dispatch a field to its bound resolver with this request's context."""
    return await RESOLVERS[(entity, field)](parent, arguments, info.context)


__all__ = ["RESOLVERS", "Resolver", "resolve"]
