"""
HTTP access to one remote resource family
"""

from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from ..errors import DecodeError, RemoteError, TransportError
from ..logging import get_logger
from .cache import RequestCache

logger = get_logger(__name__)


class RemoteResource:
    """Base address, shared HTTP client and request cache for one resource family.

    Every ``get`` performs at most one GET per distinct URL for the lifetime
    of the instance. There are no retries; timeouts come from the client.
    """

    def __init__(self, base_url: str, client: httpx.AsyncClient):
        self.base_url = base_url.rstrip("/") + "/"
        self._client = client
        self._cache = RequestCache()

    def resolve_url(self, path: str, params: dict[str, Any] | None = None) -> httpx.URL:
        url = httpx.URL(self.base_url + path.lstrip("/"))
        if params:
            url = url.copy_merge_params(params)
        return url

    async def get(
        self,
        path: str,
        shape: TypeAdapter[Any],
        params: dict[str, Any] | None = None,
    ) -> Any:
        """GET ``base_url + path`` and validate the JSON body into ``shape``.

        Raises:
            TransportError: The request could not complete
            RemoteError: The remote answered with a non-success status
            DecodeError: The body is not JSON or does not match ``shape``
        """
        url = str(self.resolve_url(path, params))
        payload = await self._cache.get_or_fetch(("GET", url), lambda: self._fetch_json(url))

        try:
            return shape.validate_python(payload)
        except ValidationError as e:
            logger.warning("Remote body did not match expected shape", url=url, error=str(e))
            raise DecodeError(f"Unexpected response shape from {url}: {e}", url) from e

    async def _fetch_json(self, url: str) -> Any:
        logger.debug("Fetching remote resource", method="GET", url=url)
        try:
            response = await self._client.get(url)
        except httpx.TransportError as e:
            logger.warning("Remote fetch failed", url=url, error=repr(e))
            raise TransportError(f"Request to {url} failed: {e!r}", url) from e

        if not response.is_success:
            logger.warning("Remote returned error status", url=url, status_code=response.status_code)
            raise RemoteError(
                f"Request to {url} returned {response.status_code}",
                url,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning("Remote body is not valid JSON", url=url)
            raise DecodeError(f"Invalid JSON from {url}: {e}", url) from e

    def close(self) -> None:
        """Drop cached results; the shared client stays open."""
        self._cache.clear()
