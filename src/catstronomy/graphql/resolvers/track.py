from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ...logging import get_logger

if TYPE_CHECKING:
    from ...models import AuthorModel, ModuleModel, TrackModel
    from ..context import RequestContext

logger = get_logger(__name__)


# Field resolvers
async def resolve_track_author(
    parent: TrackModel, arguments: Mapping[str, Any], context: RequestContext
) -> AuthorModel | None:
    """
    Resolve the author of a track from its ``authorId``.

    The backing record only carries the author's id. A missing or empty id
    means the track has no author, and no fetch is made.
    """
    author_id = parent.author_id
    if not author_id:
        logger.debug("Track has no author id", track_id=parent.id)
        return None

    return await context.data_sources.track_api.get_author(author_id)


async def resolve_track_modules(
    parent: TrackModel, arguments: Mapping[str, Any], context: RequestContext
) -> list[ModuleModel]:
    """Resolve the modules that make up a track."""
    return await context.data_sources.track_api.get_track_modules(parent.id)
