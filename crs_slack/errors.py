"""Errors raised by the Slack client."""

from typing import Any, Dict, Optional


class SlackError(Exception):
    """Base class for everything raised by crs_slack."""


class SlackApiError(SlackError):
    """Slack answered with ``ok: false``."""

    def __init__(
        self,
        code: str,
        context: Optional[str] = None,
        response: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.context = context
        self.response = response or {}
        message = f"Slack API error: {code}"
        if context:
            message = f"{context}: {message}"
        super().__init__(message)

    def with_context(self, context: str) -> "SlackApiError":
        """Return a copy of this error carrying a call-site message."""
        return SlackApiError(self.code, context=context, response=self.response)


class SlackTransportError(SlackError):
    """The request never produced a usable API envelope (network or JSON)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class SlackConfigError(SlackError):
    """Missing or invalid client configuration."""
