"""WebhookSender: serialize a Message and POST it to a Discord webhook."""

from __future__ import annotations

from typing import Any

from discordhook.config import Settings
from discordhook.core.multipart import build_multipart
from discordhook.core.payload import build_payload, encode_payload
from discordhook.models import Message
from discordhook.transports.base import Transport, TransportResponse
from discordhook.transports.httpx_transport import HttpxTransport
from discordhook.utils.logging import get_logger, redact

log = get_logger(__name__)


class WebhookSender:
    """Sends messages to one webhook URL.

    The sender keeps no per-call state, so concurrent ``send`` calls on the
    same instance are independent. If no transport is given, an
    ``HttpxTransport`` is created and closed by :meth:`aclose`; an injected
    transport is left for the caller to close.
    """

    def __init__(
        self,
        url: Any,
        *,
        transport: Transport | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._url = str(url)
        self._owns_transport = transport is None
        self._transport = transport or HttpxTransport(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> WebhookSender:
        return cls(settings.webhook_url, timeout=settings.timeout)

    @property
    def url(self) -> str:
        return self._url

    async def send(self, message: Message) -> tuple[bytes, TransportResponse]:
        """Send ``message`` and return the raw response body and metadata.

        Raises SerializationError if the payload cannot be encoded and
        TransportError if the request does not complete. A non-2xx status
        is returned like any other response.
        """
        payload = build_payload(message)
        body = build_multipart(encode_payload(payload), message.attachments)

        log.info(
            "webhook_sending",
            url=redact(self._url),
            embeds=len(payload.get("embeds", [])),
            files=len(message.attachments),
            size=len(body.content),
        )

        resp = await self._transport.request(
            "POST",
            self._url,
            headers={"Content-Type": body.content_type},
            content=body.content,
        )

        log.debug(
            "webhook_response",
            status=resp.status_code,
            body=redact(resp.text),
        )
        return resp.content, resp

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> WebhookSender:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
