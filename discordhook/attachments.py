"""File attachments and how they are loaded from disk."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator

from discordhook.errors import ResourceReadError
from discordhook.utils.logging import get_logger

log = get_logger(__name__)


@contextmanager
def open_scoped(path: str | Path) -> Iterator[BinaryIO]:
    """Hold a read handle on ``path`` for the duration of the block.

    The handle is released as soon as the block exits, whether the read
    succeeded or not.
    """
    handle = open(path, "rb")
    try:
        yield handle
    finally:
        handle.close()


@dataclass(frozen=True)
class Attachment:
    content: bytes
    filename: str

    @classmethod
    def from_path(cls, path: str | Path, filename: str | None = None) -> Attachment:
        """Read ``path`` fully into memory.

        The filename defaults to the last path component. Raises
        ResourceReadError if the file cannot be read.
        """
        path = Path(path)
        try:
            with open_scoped(path) as handle:
                content = handle.read()
        except OSError as exc:
            raise ResourceReadError(path, exc.strerror or str(exc)) from exc

        log.debug("attachment_loaded", path=str(path), size=len(content))
        return cls(content=content, filename=filename or path.name)

    def __repr__(self) -> str:
        return f"Attachment(filename={self.filename!r}, size={len(self.content)})"
