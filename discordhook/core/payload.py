"""Message -> ``payload_json`` encoding.

Every optional attribute is emitted only when it is set; absent values
never appear as ``null`` on the wire.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Iterable

from discordhook.color import MAX_COLOR, DiscordColor
from discordhook.errors import SerializationError
from discordhook.models import Embed, EmbedAuthor, EmbedField, EmbedFooter, Message
from discordhook.utils.logging import get_logger

log = get_logger(__name__)

MAX_CONTENT_LENGTH = 2000
MAX_EMBEDS = 10
MAX_EMBED_FIELDS = 25


def _present(pairs: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Build a mapping from the pairs whose value is not None."""
    return {key: value for key, value in pairs if value is not None}


def _encode_color(color: DiscordColor | int | None) -> int | None:
    if color is None:
        return None
    if isinstance(color, DiscordColor):
        return int(color)
    if isinstance(color, bool) or not isinstance(color, int):
        raise SerializationError(f"embed color must be an int, got {color!r}")
    if not 0 <= color <= MAX_COLOR:
        raise SerializationError(f"embed color {color} is outside the 24-bit range")
    return color


def _encode_timestamp(timestamp: str | datetime | None) -> str | None:
    if isinstance(timestamp, datetime):
        return timestamp.isoformat()
    return timestamp


def encode_author(author: EmbedAuthor) -> dict[str, Any]:
    return _present([
        ("name", author.name),
        ("url", author.url),
        ("icon_url", author.icon_url),
    ])


def encode_footer(footer: EmbedFooter) -> dict[str, Any]:
    return _present([
        ("text", footer.text),
        ("icon_url", footer.icon_url),
    ])


def encode_field(embed_field: EmbedField) -> dict[str, Any]:
    return _present([
        ("name", embed_field.name),
        ("value", embed_field.value),
        ("inline", embed_field.inline),
    ])


def encode_embed(embed: Embed) -> dict[str, Any]:
    fields = None
    if embed.fields is not None:
        all_fields = list(embed.fields)
        if len(all_fields) > MAX_EMBED_FIELDS:
            log.warning(
                "fields_clamped",
                count=len(all_fields),
                limit=MAX_EMBED_FIELDS,
                title=embed.title,
            )
        fields = [encode_field(f) for f in all_fields[:MAX_EMBED_FIELDS]]

    return _present([
        ("title", embed.title),
        ("description", embed.description),
        ("url", embed.url),
        ("color", _encode_color(embed.color)),
        ("timestamp", _encode_timestamp(embed.timestamp)),
        ("author", encode_author(embed.author) if embed.author is not None else None),
        ("footer", encode_footer(embed.footer) if embed.footer is not None else None),
        ("fields", fields),
    ])


def clamp_content(content: str | None) -> str | None:
    """Cut ``content`` to the first 2000 characters, warning if it was longer."""
    if content is None or len(content) <= MAX_CONTENT_LENGTH:
        return content
    log.warning(
        "content_clamped",
        length=len(content),
        limit=MAX_CONTENT_LENGTH,
    )
    return content[:MAX_CONTENT_LENGTH]


def clamp_embeds(embeds: Iterable[Embed] | None) -> list[Embed] | None:
    """Keep the first 10 embeds, warning if more were given."""
    if embeds is None:
        return None
    embeds = list(embeds)
    if len(embeds) > MAX_EMBEDS:
        log.warning("embeds_clamped", count=len(embeds), limit=MAX_EMBEDS)
    return embeds[:MAX_EMBEDS]


def build_payload(message: Message) -> dict[str, Any]:
    """Clamp ``message`` to Discord's limits and map it to the JSON payload."""
    embeds = clamp_embeds(message.embeds)
    avatar_url = str(message.avatar_url) if message.avatar_url is not None else None

    return _present([
        ("content", clamp_content(message.content)),
        ("username", message.username),
        ("tts", message.tts),
        ("thread_name", message.thread_name),
        ("avatar_url", avatar_url),
        ("embeds", [encode_embed(e) for e in embeds] if embeds is not None else None),
    ])


def encode_payload(payload: dict[str, Any]) -> bytes:
    """Serialize the payload mapping to compact UTF-8 JSON."""
    try:
        data = json.dumps(
            payload,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode webhook payload: {exc}") from exc
    return data
