"""aiohttp transport behind IHttpClient.

One pooled ClientSession per client, opened on first request. Responses are
read fully and handed back as raw bytes; status codes are not interpreted here.
"""

from typing import Any

import aiohttp

from wger_catalog.infrastructure.observability import get_infrastructure_logger
from wger_catalog.ingestion.config.value_objects import HttpClientConfig
from wger_catalog.ingestion.ports.http import HttpResponse, IHttpClient

log = get_infrastructure_logger("aiohttp-client")

DEFAULT_HEADERS = {"Accept": "application/json"}


class AiohttpClient(IHttpClient):
    def __init__(self, config: HttpClientConfig | None = None):
        self.config = config or HttpClientConfig()
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "AiohttpClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _timeout(self, total: float | None = None) -> aiohttp.ClientTimeout:
        if total is None:
            total = self.config.timeout
        return aiohttp.ClientTimeout(total=total, connect=self.config.connect_timeout)

    @property
    def session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout(), headers=DEFAULT_HEADERS
            )
            log.debug(
                "session_opened",
                timeout=self.config.timeout,
                verify_ssl=self.config.verify_ssl,
            )
        return self._session

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """GET ``url`` and return the whole body.

        Raises:
            aiohttp.InvalidURL: ``url`` cannot be parsed
            aiohttp.ClientError: Connection or protocol failure
            asyncio.TimeoutError: ``timeout`` (or the configured default) exceeded
        """
        request = self.session.get(
            url,
            params=params,
            headers=headers,
            timeout=self._timeout(timeout),
            ssl=self.config.verify_ssl,
        )
        async with request as resp:
            return HttpResponse(
                status_code=resp.status,
                body=await resp.read(),
                headers=dict(resp.headers),
                url=str(resp.url),
            )

    async def close(self) -> None:
        """Close the session; safe to call repeatedly."""
        session, self._session = self._session, None
        if session is not None and not session.closed:
            await session.close()
            log.debug("session_closed")
