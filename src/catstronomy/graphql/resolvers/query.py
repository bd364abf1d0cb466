from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ...logging import get_logger

if TYPE_CHECKING:
    from ...models import ModuleModel, TrackModel
    from ..context import RequestContext

logger = get_logger(__name__)


# Query resolvers receive no parent; they only start fetches
async def resolve_tracks_for_home(
    parent: None, arguments: Mapping[str, Any], context: RequestContext
) -> list[TrackModel]:
    """Resolve the track list shown on the home page."""
    tracks = await context.data_sources.track_api.get_tracks_for_home()
    logger.debug("Resolved home tracks", count=len(tracks))
    return tracks


async def resolve_track(
    parent: None, arguments: Mapping[str, Any], context: RequestContext
) -> TrackModel | None:
    """Resolve a single track. An empty id matches no track and is never fetched."""
    track_id = arguments["id"]
    if not track_id:
        return None
    return await context.data_sources.track_api.get_track(track_id)


async def resolve_module(
    parent: None, arguments: Mapping[str, Any], context: RequestContext
) -> ModuleModel | None:
    module_id = arguments["id"]
    if not module_id:
        return None
    return await context.data_sources.track_api.get_module(module_id)
