"""
REST HTTP transport for the Cactive Hypixel API.
"""

import logging
from typing import Optional, Sequence

import httpx

from cactive_hypixel.errors import TransportError

DEFAULT_BASE_URL = "https://hypixel.cactive.network/api/v3"
USER_AGENT = "cactive-hypixel-api/0.1.0"

logger = logging.getLogger(__name__)

QueryParams = Sequence[tuple[str, str]]


def build_url(base_url: str, path: str, params: QueryParams) -> str:
    """Join base URL, resource path and ordered query parameters."""
    return str(httpx.URL(f"{base_url.rstrip('/')}/{path.lstrip('/')}", params=list(params)))


def _redact(params: QueryParams) -> list[tuple[str, str]]:
    return [(k, "REDACTED" if k == "key" else v) for k, v in params]


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def url(self, path: str, params: QueryParams) -> str:
        return build_url(self._base_url, path, params)

    async def get(self, path: str, params: QueryParams) -> bytes:
        """GET a resource and return the raw body, whatever the status code.

        The service sends its envelope on error statuses too, so the status
        is left for the envelope decoder to interpret.
        """
        logger.debug("GET %s", build_url(self._base_url, path, _redact(params)))
        try:
            resp = await self._client.get(self.url(path, params))
        except httpx.HTTPError as e:
            logger.debug("GET %s failed: %s", path, e)
            raise TransportError(str(e) or type(e).__name__) from e
        logger.debug("GET %s -> HTTP %d (%d bytes)", path, resp.status_code, len(resp.content))
        return resp.content

    async def close(self) -> None:
        await self._client.aclose()
