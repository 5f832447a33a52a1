"""multipart/form-data body construction for webhook uploads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
from uuid import uuid4

import httpx

from discordhook.attachments import Attachment

FILE_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class MultipartBody:
    boundary: str
    content: bytes

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"


def new_boundary() -> str:
    return f"Boundary-{uuid4()}"


def build_multipart(
    payload_json: bytes,
    attachments: Sequence[Attachment] = (),
    boundary: str | None = None,
) -> MultipartBody:
    """Assemble the ``payload_json`` part and one ``files[i]`` part per attachment."""
    boundary = boundary or new_boundary()
    content_type = f"multipart/form-data; boundary={boundary}"

    # payload_json goes in as a file field without a filename so httpx
    # always picks multipart, even when there are no attachments
    files: list[tuple[str, tuple]] = [("payload_json", (None, payload_json))]
    files += [
        (f"files[{index}]", (attachment.filename, attachment.content, FILE_CONTENT_TYPE))
        for index, attachment in enumerate(attachments)
    ]

    # Only the encoded body is kept; the request itself is never sent
    request = httpx.Request("POST", "/", headers={"Content-Type": content_type}, files=files)
    return MultipartBody(boundary=boundary, content=request.read())
