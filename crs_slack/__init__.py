"""Minimal Slack Web API client."""

from .blocks import ImageBlock, ImageUrl, section_block, serialize_blocks
from .client import SlackClient
from .config import SlackConfig, load_config
from .errors import SlackApiError, SlackConfigError, SlackError, SlackTransportError
from .users import UserRecord, build_user_directory, clean_display_name

__version__ = "0.1.0"

__all__ = [
    "ImageBlock",
    "ImageUrl",
    "SlackApiError",
    "SlackClient",
    "SlackConfig",
    "SlackConfigError",
    "SlackError",
    "SlackTransportError",
    "UserRecord",
    "build_user_directory",
    "clean_display_name",
    "load_config",
    "section_block",
    "serialize_blocks",
]
