"""Channel lifecycle commands."""

import logging
import time
from typing import List, Optional

import typer

from ..config import load_config
from ..utils import dump_yaml
from .session import slack_session

logger = logging.getLogger(__name__)

app = typer.Typer(help="Create, invite to and archive channels")


@app.command("create")
def create(
    name: str = typer.Argument(..., help="Channel name"),
    private: bool = typer.Option(False, "--private", help="Create a private channel"),
):
    """Create a channel."""
    with slack_session() as client:
        data = client.conversations_create(name, is_private=private)
        channel = data.get("channel", {})
        print(dump_yaml({"ok": True, "id": channel.get("id"), "name": channel.get("name")}))


@app.command("invite")
def invite(
    channel: str = typer.Argument(..., help="Channel ID"),
    users: List[str] = typer.Argument(..., help="User IDs to invite"),
):
    """Invite users to a channel."""
    with slack_session() as client:
        client.conversations_invite(channel, users)
        print(dump_yaml({"ok": True, "channel": channel, "invited": list(users)}))


@app.command("archive")
def archive(channel: str = typer.Argument(..., help="Channel ID")):
    """Archive a channel."""
    with slack_session() as client:
        client.conversations_archive(channel)
        print(dump_yaml({"ok": True, "channel": channel, "archived": True}))


@app.command("demo")
def demo(
    name: str = typer.Argument(..., help="Name of the throwaway channel"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="User ID to invite (default: slack.demo_user_id)"),
    wait: Optional[float] = typer.Option(None, "--wait", "-w", help="Seconds to keep the channel before archiving"),
):
    """Create a channel, invite one user, wait, then archive it."""
    with slack_session() as client:
        config = load_config()
        user = user or config.demo_user_id
        wait = config.demo_wait_seconds if wait is None else wait

        created = client.conversations_create(name)
        channel_id = created["channel"]["id"]
        logger.info(f"Created #{name} ({channel_id})")

        try:
            if user:
                client.conversations_invite(channel_id, [user])
                logger.info(f"Invited {user} to {channel_id}")
            else:
                logger.warning("No user to invite, skipping invite")

            time.sleep(wait)
        finally:
            client.conversations_archive(channel_id)
            logger.info(f"Archived {channel_id}")

        print(dump_yaml({"ok": True, "id": channel_id, "name": name, "invited": [user] if user else [], "archived": True}))
