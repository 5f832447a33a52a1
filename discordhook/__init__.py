"""discordhook - send messages, embeds and files to Discord webhooks."""

from discordhook.attachments import Attachment
from discordhook.color import DiscordColor
from discordhook.errors import (
    DiscordHookError,
    ResourceReadError,
    SerializationError,
    TransportError,
)
from discordhook.models import Embed, EmbedAuthor, EmbedField, EmbedFooter, Message
from discordhook.sender import WebhookSender
from discordhook.transports import HttpxTransport, Transport, TransportResponse

__version__ = "0.1.0"

__all__ = [
    "Attachment",
    "DiscordColor",
    "DiscordHookError",
    "ResourceReadError",
    "SerializationError",
    "TransportError",
    "Embed",
    "EmbedAuthor",
    "EmbedField",
    "EmbedFooter",
    "Message",
    "WebhookSender",
    "HttpxTransport",
    "Transport",
    "TransportResponse",
]
