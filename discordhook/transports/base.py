"""Abstract transport base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response handed back to the caller untouched."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""
    url: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Transport(ABC):
    """Performs a single HTTP request.

    Implementations raise ``TransportError`` when no response could be
    obtained. Any status code, including 4xx/5xx, is a valid response.
    """

    @abstractmethod
    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: bytes,
    ) -> TransportResponse: ...

    async def aclose(self) -> None:
        return None
