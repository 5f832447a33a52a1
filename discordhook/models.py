"""Webhook message models.

Field names mirror the execute-webhook JSON params:
https://discord.com/developers/docs/resources/webhook#execute-webhook
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Sequence

from discordhook.attachments import Attachment
from discordhook.color import DiscordColor


@dataclass(frozen=True)
class EmbedAuthor:
    name: str | None = None
    url: str | None = None
    icon_url: str | None = None


@dataclass(frozen=True)
class EmbedFooter:
    text: str | None = None
    icon_url: str | None = None


@dataclass(frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool | None = None


@dataclass(frozen=True)
class Embed:
    """Rich content block rendered by the Discord client.

    Discord allows at most 25 fields per embed; extra fields are dropped
    when the message is sent.
    """

    title: str | None = None
    description: str | None = None
    url: str | None = None
    color: DiscordColor | int | None = None
    # ISO8601 string, or a datetime rendered with isoformat()
    timestamp: str | datetime | None = None
    author: EmbedAuthor | None = None
    footer: EmbedFooter | None = None
    fields: Sequence[EmbedField] | None = None


@dataclass(frozen=True)
class Message:
    """A single webhook execution.

    ``content`` is limited to 2000 characters and ``embeds`` to 10 entries;
    longer values are clamped (with a warning) rather than rejected.
    The content limit counts Unicode code points, so clamping can split a
    multi-code-point grapheme such as a ZWJ emoji sequence.
    ``thread_name`` creates a thread and only works for forum or media
    channels.
    """

    content: str | None = None
    username: str | None = None
    # Anything whose str() is a URL (str, httpx.URL, ...)
    avatar_url: Any = None
    tts: bool | None = None
    thread_name: str | None = None
    embeds: Sequence[Embed] | None = None
    attachments: Sequence[Attachment] = field(default_factory=tuple)
