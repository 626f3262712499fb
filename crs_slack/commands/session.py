"""Client construction and error reporting shared by the commands."""

import sys
from contextlib import contextmanager

import typer

from ..client import SlackClient
from ..config import load_config
from ..errors import SlackError
from ..utils import dump_yaml, error_payload


@contextmanager
def slack_session():
    """Yield a configured SlackClient; report SlackError as YAML and exit 1."""
    try:
        with SlackClient.from_config(load_config()) as client:
            yield client
    except SlackError as e:
        print(dump_yaml(error_payload(e)), file=sys.stderr)
        raise typer.Exit(code=1)
