"""Transport backed by httpx.AsyncClient."""

from __future__ import annotations

from typing import Mapping

import httpx

from discordhook.errors import TransportError
from discordhook.transports.base import Transport, TransportResponse
from discordhook.utils.logging import get_logger, redact

log = get_logger(__name__)


class HttpxTransport(Transport):
    def __init__(
        self,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        # A caller-supplied client stays open after aclose()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: bytes,
    ) -> TransportResponse:
        try:
            resp = await self._client.request(
                method, url, headers=dict(headers), content=content
            )
        # InvalidURL is not an HTTPError subclass
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.error(
                "webhook_transport_error",
                url=redact(url),
                error=type(e).__name__,
            )
            raise TransportError(
                redact(f"{method} {url} failed: {type(e).__name__}: {e}"), url=url
            ) from e

        return TransportResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            content=resp.content,
            url=str(resp.url),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
