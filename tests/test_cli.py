"""Tests for the discordhook CLI."""

import pytest
from click.testing import CliRunner

from discordhook import main as main_module
from discordhook.errors import TransportError
from discordhook.transports.base import TransportResponse

URL = "https://discord.com/api/webhooks/1/tok"


@pytest.fixture
def sent(monkeypatch, tmp_path):
    """Replace the network call and record what the CLI would send."""
    calls = []
    response = {"value": TransportResponse(status_code=204)}

    async def fake_run(settings, message):
        calls.append((settings, message))
        result = response["value"]
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(main_module, "run", fake_run)
    monkeypatch.setattr(main_module, "setup_logging", lambda **kwargs: None)
    monkeypatch.delenv("DISCORDHOOK_WEBHOOK_URL", raising=False)
    monkeypatch.delenv("DISCORDHOOK_CONFIG", raising=False)
    monkeypatch.setenv("DISCORDHOOK_CONFIG_DIR", str(tmp_path))
    return calls, response


class TestSendCommand:
    def test_basic_send(self, sent):
        calls, _ = sent
        result = CliRunner().invoke(main_module.cli, ["send", "--url", URL, "--content", "hi"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "204"
        settings, message = calls[0]
        assert settings.webhook_url == URL
        assert message.content == "hi"
        assert message.tts is None
        assert message.embeds is None

    def test_embed_and_file(self, sent, tmp_path):
        calls, _ = sent
        path = tmp_path / "log.txt"
        path.write_bytes(b"lines")
        result = CliRunner().invoke(main_module.cli, [
            "send", "--url", URL,
            "--embed-title", "Build", "--embed-color", "#FF0000",
            "--file", str(path), "--tts",
        ])
        assert result.exit_code == 0, result.output
        _, message = calls[0]
        assert message.embeds[0].title == "Build"
        assert message.embeds[0].color == 16711680
        assert message.attachments[0].filename == "log.txt"
        assert message.attachments[0].content == b"lines"
        assert message.tts is True

    def test_bad_color(self, sent):
        result = CliRunner().invoke(main_module.cli, ["send", "--url", URL, "--embed-color", "nope"])
        assert result.exit_code == 2
        assert "hex color" in result.output

    def test_missing_url(self, sent):
        result = CliRunner().invoke(main_module.cli, ["send", "--content", "hi"])
        assert result.exit_code == 2
        assert "No webhook URL" in result.output

    def test_url_from_env(self, sent, monkeypatch):
        calls, _ = sent
        monkeypatch.setenv("DISCORDHOOK_WEBHOOK_URL", URL)
        result = CliRunner().invoke(main_module.cli, ["send", "--content", "hi"])
        assert result.exit_code == 0, result.output
        assert calls[0][0].webhook_url == URL

    def test_default_username_from_settings(self, sent, monkeypatch):
        calls, _ = sent
        monkeypatch.setenv("DISCORDHOOK_USERNAME", "ci-bot")
        CliRunner().invoke(main_module.cli, ["send", "--url", URL, "--content", "hi"])
        assert calls[0][1].username == "ci-bot"

    def test_error_status_exit_code(self, sent):
        _, response = sent
        response["value"] = TransportResponse(status_code=400, content=b'{"message": "bad"}')
        result = CliRunner().invoke(main_module.cli, ["send", "--url", URL, "--content", "hi"])
        assert result.exit_code == 2
        assert "400" in result.output
        assert '"bad"' in result.output

    def test_transport_error(self, sent):
        _, response = sent
        response["value"] = TransportError("connection refused", url=URL)
        result = CliRunner().invoke(main_module.cli, ["send", "--url", URL, "--content", "hi"])
        assert result.exit_code == 1
        assert "connection refused" in result.output
