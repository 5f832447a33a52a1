"""Shared fixtures: an in-memory transport and a multipart parser."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import pytest

from discordhook.transports.base import Transport, TransportResponse


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: dict[str, str]
    content: bytes


class FakeTransport(Transport):
    def __init__(self, response: TransportResponse | None = None, error: Exception | None = None) -> None:
        self.response = response or TransportResponse(status_code=204)
        self.error = error
        self.requests: list[RecordedRequest] = []
        self.closed = False

    async def request(self, method, url, *, headers, content):
        self.requests.append(RecordedRequest(method, url, dict(headers), content))
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self) -> None:
        self.closed = True


@dataclass
class Part:
    name: str
    filename: str | None
    content_type: str | None
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)


_PARAM_RE = re.compile(r'(\w+)="([^"]*)"')


def parse_multipart(body: bytes, boundary: str) -> list[Part]:
    delimiter = b"--" + boundary.encode()
    assert body.endswith(delimiter + b"--\r\n")

    sections = body.split(delimiter)
    assert sections[0] == b""
    assert sections[-1] == b"--\r\n"

    parts = []
    for section in sections[1:-1]:
        assert section.startswith(b"\r\n") and section.endswith(b"\r\n")
        head, _, content = section[2:-2].partition(b"\r\n\r\n")
        headers = {}
        for line in head.decode().split("\r\n"):
            key, _, value = line.partition(": ")
            headers[key] = value
        params = dict(_PARAM_RE.findall(headers["Content-Disposition"]))
        parts.append(Part(
            name=params["name"],
            filename=params.get("filename"),
            content_type=headers.get("Content-Type"),
            content=content,
            headers=headers,
        ))
    return parts


@pytest.fixture
def transport():
    return FakeTransport()
