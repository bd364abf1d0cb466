"""
Author GraphQL type definitions
"""

import strawberry


@strawberry.type
class Author:
    """Author of a complete track or a module."""

    id: strawberry.ID
    name: str
    photo: str | None
