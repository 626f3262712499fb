"""Message posting commands."""

import sys
from typing import List, Optional

import typer

from ..blocks import section_block
from ..utils import dump_yaml, parse_image_spec
from .session import slack_session

app = typer.Typer(help="Post messages and thread replies")


@app.command("post")
def post_message(
    channel: str = typer.Argument(..., help="Channel ID"),
    text: str = typer.Argument(..., help="Message text"),
):
    """Post a message to a Slack channel."""
    with slack_session() as client:
        data = client.chat_post_message(channel, text)
        print(dump_yaml({"ok": True, "channel": data.get("channel", channel), "ts": data.get("ts")}))


@app.command("reply")
def reply(
    channel: str = typer.Argument(..., help="Channel ID"),
    thread_ts: str = typer.Argument(..., help="Timestamp of the parent message"),
    images: Optional[List[str]] = typer.Option(
        None, "--image", "-i", help="Image as URL or 'URL|alt text' (repeatable)"
    ),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="mrkdwn text shown above the images"),
):
    """Reply to a thread with text and/or image blocks.

    Examples:

        crs-slack message reply C08TH1GJPUZ 1719288455.000100 -i "https://example.com/a.png|LGTM"

        crs-slack message reply C08TH1GJPUZ 1719288455.000100 -t "*done*"
    """
    try:
        image_list = [parse_image_spec(spec) for spec in images or []]
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        raise typer.Exit(code=1)

    blocks = [section_block(text)] if text else []
    blocks.extend(image.to_block() for image in image_list)
    if not blocks:
        print("❌ Nothing to post: pass --text and/or --image", file=sys.stderr)
        raise typer.Exit(code=1)

    with slack_session() as client:
        data = client.post_reply(channel, thread_ts, blocks)
        print(dump_yaml({"ok": True, "channel": channel, "thread_ts": thread_ts, "ts": data.get("ts")}))
