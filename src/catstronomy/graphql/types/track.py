"""
Track GraphQL type definitions

Resolvers receive the TrackModel backing record as ``self``, not an
instance of this class.
"""

import strawberry

from ..resolvers import resolve
from .author import Author
from .module import Module


@strawberry.type
class Track:
    """A track is a group of modules that teaches about a specific topic."""

    id: strawberry.ID
    title: str
    thumbnail: str | None
    length: int | None = strawberry.field(description="Approximate length to complete, in minutes")
    modules_count: int | None
    description: str | None
    number_of_views: int | None

    @strawberry.field
    async def author(self, info: strawberry.Info) -> Author | None:
        """The track's main author, synthesized from the backing record's authorId."""
        return await resolve("Track", "author", self, {}, info)

    @strawberry.field
    async def modules(self, info: strawberry.Info) -> list[Module]:
        """The track's complete list of modules."""
        return await resolve("Track", "modules", self, {}, info)
