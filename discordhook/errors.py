"""Exceptions raised by discordhook."""

from __future__ import annotations

from pathlib import Path


class DiscordHookError(Exception):
    """Base class for all discordhook errors."""


class SerializationError(DiscordHookError):
    """The message could not be converted to the webhook JSON payload."""


class TransportError(DiscordHookError):
    """The HTTP request to the webhook could not be completed.

    A response with a non-2xx status is *not* a transport error; it is
    returned to the caller as-is.
    """

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class ResourceReadError(DiscordHookError):
    """A local attachment could not be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Cannot read attachment {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
