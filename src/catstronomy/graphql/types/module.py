"""
Module GraphQL type definitions
"""

import strawberry


@strawberry.type
class Module:
    """A single unit of teaching within a track."""

    id: strawberry.ID
    title: str
    length: int | None = strawberry.field(description="Length in minutes")
    content: str | None
    video_url: str | None
