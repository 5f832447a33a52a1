"""discordhook command line: send one message to a webhook."""

from __future__ import annotations

import asyncio
import sys

import click

from discordhook.attachments import Attachment
from discordhook.color import DiscordColor
from discordhook.config import Settings, load_settings
from discordhook.errors import DiscordHookError
from discordhook.models import Embed, Message
from discordhook.sender import WebhookSender
from discordhook.transports.base import TransportResponse
from discordhook.utils.logging import get_logger, setup_logging

log = get_logger(__name__)


async def run(settings: Settings, message: Message) -> TransportResponse:
    async with WebhookSender.from_settings(settings) as sender:
        _, resp = await sender.send(message)
    return resp


def _parse_color(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> DiscordColor | None:
    if value is None:
        return None
    color = DiscordColor.from_hex(value)
    if color is None:
        raise click.BadParameter(f"{value!r} is not a hex color like #FF0000")
    return color


@click.group()
def cli() -> None:
    """Send messages to Discord webhooks."""


@cli.command()
@click.option("--url", default=None, help="Webhook URL (defaults to DISCORDHOOK_WEBHOOK_URL)")
@click.option("--content", default=None, help="Message text, up to 2000 characters")
@click.option("--username", default=None, help="Override the webhook's display name")
@click.option("--avatar-url", default=None, help="Override the webhook's avatar")
@click.option("--tts", is_flag=True, help="Send as a text-to-speech message")
@click.option("--thread-name", default=None, help="Create a thread (forum/media channels)")
@click.option(
    "--file", "files", multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Attach a file (repeatable)",
)
@click.option("--embed-title", default=None, help="Title of a single embed")
@click.option("--embed-description", default=None, help="Description of a single embed")
@click.option("--embed-color", default=None, callback=_parse_color, help="Embed color as hex")
@click.option("--config", "config_path", default=None, help="Path to config YAML file")
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
def send(
    url: str | None,
    content: str | None,
    username: str | None,
    avatar_url: str | None,
    tts: bool,
    thread_name: str | None,
    files: tuple[str, ...],
    embed_title: str | None,
    embed_description: str | None,
    embed_color: DiscordColor | None,
    config_path: str | None,
    log_level: str | None,
) -> None:
    """Send one message to a webhook and print the response."""
    settings = load_settings(config_path)
    if url:
        settings.webhook_url = url
    if log_level:
        settings.log_level = log_level
    setup_logging(level=settings.log_level, json_output=settings.log_json)

    if not settings.webhook_url:
        raise click.UsageError("No webhook URL: pass --url or set DISCORDHOOK_WEBHOOK_URL")

    embeds = None
    if embed_title or embed_description or embed_color is not None:
        embeds = [Embed(title=embed_title, description=embed_description, color=embed_color)]

    try:
        message = Message(
            content=content,
            username=username or settings.username or None,
            avatar_url=avatar_url or settings.avatar_url or None,
            tts=tts or None,
            thread_name=thread_name,
            embeds=embeds,
            attachments=[Attachment.from_path(path) for path in files],
        )
        resp = asyncio.run(run(settings, message))
    except DiscordHookError as e:
        log.error("send_failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"{resp.status_code}")
    if resp.content:
        click.echo(resp.text)
    if not resp.is_success:
        sys.exit(2)


if __name__ == "__main__":
    cli()
