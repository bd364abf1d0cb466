"""
Root GraphQL query definitions
"""

import strawberry

from ..resolvers import resolve
from ..types.module import Module
from ..types.track import Track


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def tracks_for_home(self, info: strawberry.Info) -> list[Track]:
        """Get tracks array for homepage grid."""
        return await resolve("Query", "tracksForHome", self, {}, info)

    @strawberry.field
    async def track(self, info: strawberry.Info, id: strawberry.ID) -> Track | None:
        """Get a single track by ID."""
        return await resolve("Query", "track", self, {"id": id}, info)

    @strawberry.field
    async def module(self, info: strawberry.Info, id: strawberry.ID) -> Module | None:
        """Get a single module by ID."""
        return await resolve("Query", "module", self, {"id": id}, info)
