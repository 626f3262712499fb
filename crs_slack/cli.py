import logging

import typer

from . import __version__
from .commands.channel import app as channel_app
from .commands.message import app as message_app
from .commands.session import slack_session
from .utils import dump_yaml, format_directory

app = typer.Typer(help="Slack Web API client")

app.add_typer(message_app, name="message")
app.add_typer(channel_app, name="channel")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """Post messages, list users and manage channels through the Slack Web API.

    The token is read from SLACK_API_TOKEN or slack.api_token in config.yaml.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("users")
def users():
    """List active members keyed by display name."""
    with slack_session() as client:
        directory = client.users_list()
        print(dump_yaml(format_directory(directory)))


@app.command("version")
def version():
    """Show the client version."""
    print(__version__)


if __name__ == "__main__":
    app()
