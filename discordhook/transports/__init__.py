"""discordhook transports."""

from discordhook.transports.base import Transport, TransportResponse
from discordhook.transports.httpx_transport import HttpxTransport

__all__ = [
    "Transport",
    "TransportResponse",
    "HttpxTransport",
]
