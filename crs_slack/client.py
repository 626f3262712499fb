"""Slack Web API client."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import httpx

from .blocks import Block, ImageBlock, image_blocks, serialize_blocks
from .config import SlackConfig
from .errors import SlackApiError, SlackError
from .users import UserRecord, build_user_directory
from .utils.api import call_api, get_client
from .utils.const import DEFAULT_TIMEOUT


class SlackClient:
    """Thin wrapper around the Slack endpoints used for posting and channel upkeep.

    Every endpoint returns the full parsed response on success and raises
    SlackApiError (remote ``ok: false``) or SlackTransportError otherwise.

    Args:
        api_token: Bot or user token sent as the bearer credential.
        timeout: Seconds to wait for each request.
        logger: Logger for failure messages; defaults to this module's logger.
        http_client: Pre-built httpx.Client. The caller keeps ownership of it.
    """

    def __init__(
        self,
        api_token: str,
        timeout: float = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self._api_token = api_token
        self._logger = logger or logging.getLogger(__name__)
        self._owns_http = http_client is None
        self._http = http_client or get_client(api_token, timeout=timeout)

    @classmethod
    def from_config(cls, config: SlackConfig, logger: Optional[logging.Logger] = None) -> "SlackClient":
        return cls(config.api_token, timeout=config.timeout, logger=logger)

    @property
    def api_token(self) -> str:
        return self._api_token

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def close(self):
        if self._owns_http:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    # Transport

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return call_api(self._http, "GET", path, params, log=self._logger)

    def _post(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return call_api(self._http, "POST", path, params, log=self._logger)

    def _post_with_context(self, path: str, params: Dict[str, Any], context: str) -> Dict[str, Any]:
        try:
            return self._post(path, params)
        except SlackApiError as e:
            self._logger.error(f"{context}: {e.code}")
            raise e.with_context(context) from e
        except SlackError as e:
            self._logger.error(f"{context}: {e}")
            raise

    # Messages

    def chat_post_message(self, channel: str, text: str) -> Dict[str, Any]:
        """Post ``text`` to a channel."""
        return self._post_with_context(
            "chat.postMessage",
            {"channel": channel, "text": text},
            "Error posting message",
        )

    def post_reply(self, channel: str, thread_ts: str, blocks: Union[str, Iterable[Block]]) -> Dict[str, Any]:
        """Reply in a thread with rich content.

        Args:
            channel: Channel ID holding the thread.
            thread_ts: Timestamp of the parent message.
            blocks: Block dicts, or a JSON string that is already serialized.
        """
        params = {
            "channel": channel,
            "thread_ts": thread_ts,
            "blocks": serialize_blocks(blocks),
        }
        return self._post_with_context("chat.postMessage", params, "Error posting reply")

    def add_reply(self, channel: str, thread_ts: str, image_urls: Iterable[ImageBlock]) -> Dict[str, Any]:
        """Reply in a thread with one image block per entry of ``image_urls``."""
        return self.post_reply(channel, thread_ts, image_blocks(image_urls))

    # Users

    def users_list(self) -> Dict[str, UserRecord]:
        """Return active human members keyed by whitespace-free display name.

        e.g. {"Slackbot": UserRecord(id="USLACKBOT", display_name="Slackbot",
                                      name="slackbot", real_name="Slackbot")}
        """
        try:
            result = self._get("users.list")
        except SlackError as e:
            self._logger.error(f"Error fetching users: {e}")
            raise
        return build_user_directory(result.get("members") or [])

    # Conversations

    def conversations_create(self, name: str, is_private: bool = False) -> Dict[str, Any]:
        return self._post_with_context(
            "conversations.create",
            {"name": name, "is_private": is_private},
            "Error creating conversation",
        )

    def conversations_invite(self, channel: str, users: List[str]) -> Dict[str, Any]:
        return self._post_with_context(
            "conversations.invite",
            {"channel": channel, "users": list(users)},
            "Error inviting users",
        )

    def conversations_archive(self, channel: str) -> Dict[str, Any]:
        return self._post_with_context(
            "conversations.archive",
            {"channel": channel},
            "Error archiving conversation",
        )
