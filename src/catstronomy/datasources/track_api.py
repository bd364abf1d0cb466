"""Data source for the track catalogue REST API."""

from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from ..models import AuthorModel, ModuleModel, TrackModel
from .resource import RemoteResource

_TRACK = TypeAdapter(TrackModel)
_TRACKS = TypeAdapter(list[TrackModel])
_AUTHOR = TypeAdapter(AuthorModel)
_MODULE = TypeAdapter(ModuleModel)
_MODULES = TypeAdapter(list[ModuleModel])


def _segment(value: str) -> str:
    return quote(value, safe="")


class TrackAPI:
    """Named fetch operations against the track catalogue.

    One instance lives for one request context; identical fetches within
    that request are served from its cache.
    """

    def __init__(self, base_url: str, client: httpx.AsyncClient):
        self._resource = RemoteResource(base_url, client)

    async def get_tracks_for_home(self) -> list[TrackModel]:
        return await self._resource.get("tracks", _TRACKS)

    async def get_track(self, track_id: str) -> TrackModel:
        return await self._resource.get(f"track/{_segment(track_id)}", _TRACK)

    async def get_track_modules(self, track_id: str) -> list[ModuleModel]:
        return await self._resource.get(f"track/{_segment(track_id)}/modules", _MODULES)

    async def get_author(self, author_id: str) -> AuthorModel:
        return await self._resource.get(f"author/{_segment(author_id)}", _AUTHOR)

    async def get_module(self, module_id: str) -> ModuleModel:
        return await self._resource.get(f"module/{_segment(module_id)}", _MODULE)

    async def close(self) -> None:
        self._resource.close()
