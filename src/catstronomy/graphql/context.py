"""
Per-request context handed to every resolver
"""

from collections.abc import AsyncIterator
from dataclasses import dataclass

import httpx
from fastapi import Depends, Request
from strawberry.fastapi import BaseContext

from ..config import Settings, settings
from ..datasources import TrackAPI


@dataclass(frozen=True)
class DataSources:
    """Every data source a resolver may reach, addressed by a fixed name."""

    track_api: TrackAPI

    async def close(self) -> None:
        await self.track_api.close()


class RequestContext(BaseContext):
    """Context for one incoming GraphQL request. Never reused across requests."""

    def __init__(self, data_sources: DataSources):
        super().__init__()
        self.data_sources = data_sources


def build_data_sources(client: httpx.AsyncClient, config: Settings = settings) -> DataSources:
    """Construct fresh data source instances sharing the given HTTP client."""
    return DataSources(track_api=TrackAPI(config.tracks_api_url, client))


async def get_data_sources(request: Request) -> AsyncIterator[DataSources]:
    """FastAPI dependency yielding per-request data sources, closed afterwards."""
    data_sources = build_data_sources(request.app.state.http_client)
    try:
        yield data_sources
    finally:
        await data_sources.close()


async def get_context(data_sources: DataSources = Depends(get_data_sources)) -> RequestContext:
    """Get the context for GraphQL resolvers."""
    return RequestContext(data_sources=data_sources)
