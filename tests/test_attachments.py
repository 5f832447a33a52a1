"""Tests for attachments loaded from disk."""

from contextlib import contextmanager

import pytest

from discordhook import attachments as attachments_module
from discordhook.attachments import Attachment, open_scoped
from discordhook.errors import DiscordHookError, ResourceReadError


class TestAttachment:
    def test_direct_construction(self):
        attachment = Attachment(content=b"data", filename="d.bin")
        assert attachment.content == b"data"
        assert attachment.filename == "d.bin"

    def test_repr_hides_content(self):
        assert repr(Attachment(b"x" * 100, "big.bin")) == "Attachment(filename='big.bin', size=100)"


class TestFromPath:
    def test_reads_bytes_and_name(self, tmp_path):
        path = tmp_path / "report.csv"
        path.write_bytes(b"a,b\n1,2\n")

        attachment = Attachment.from_path(path)

        assert attachment.content == b"a,b\n1,2\n"
        assert attachment.filename == "report.csv"

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_bytes(b"hi")
        assert Attachment.from_path(str(path)).filename == "notes.txt"

    def test_filename_override(self, tmp_path):
        path = tmp_path / "tmp123"
        path.write_bytes(b"img")
        assert Attachment.from_path(path, filename="chart.png").filename == "chart.png"

    def test_binary_roundtrip(self, tmp_path):
        data = bytes(range(256)) * 4
        path = tmp_path / "blob.bin"
        path.write_bytes(data)
        assert Attachment.from_path(path).content == data

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "nope.txt"
        with pytest.raises(ResourceReadError) as exc_info:
            Attachment.from_path(missing)
        assert exc_info.value.path == missing
        assert isinstance(exc_info.value, DiscordHookError)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_is_not_readable(self, tmp_path):
        with pytest.raises(ResourceReadError):
            Attachment.from_path(tmp_path)

    def test_handle_released_after_read(self, tmp_path, monkeypatch):
        path = tmp_path / "f.txt"
        path.write_bytes(b"content")
        opened = []
        real_open_scoped = attachments_module.open_scoped

        @contextmanager
        def tracking(p):
            with real_open_scoped(p) as handle:
                opened.append(handle)
                yield handle

        monkeypatch.setattr(attachments_module, "open_scoped", tracking)
        Attachment.from_path(path)

        assert len(opened) == 1
        assert opened[0].closed


class TestOpenScoped:
    def test_closes_on_exit(self, tmp_path):
        path = tmp_path / "f.txt"
        path.write_bytes(b"x")
        with open_scoped(path) as handle:
            assert handle.read() == b"x"
        assert handle.closed

    def test_closes_on_error(self, tmp_path):
        path = tmp_path / "f.txt"
        path.write_bytes(b"x")
        with pytest.raises(RuntimeError):
            with open_scoped(path) as handle:
                raise RuntimeError("boom")
        assert handle.closed
