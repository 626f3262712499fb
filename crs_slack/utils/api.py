"""HTTP transport for the Slack Web API."""

import logging
from typing import Any, Dict, Optional

import httpx

from ..errors import SlackApiError, SlackTransportError
from .const import DEFAULT_TIMEOUT, FORM_CONTENT_TYPE, SLACK_API_BASE_URL

logger = logging.getLogger(__name__)


def get_client(
    api_token: str,
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Create an authenticated HTTP client bound to the Slack API base URL."""
    return httpx.Client(
        base_url=SLACK_API_BASE_URL,
        headers={
            "Authorization": f"Bearer {api_token}",
            "Content-Type": FORM_CONTENT_TYPE,
        },
        timeout=timeout,
        transport=transport,
    )


def serialize_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Flatten list values into the comma-joined form Slack expects."""
    if not params:
        return {}
    serialized = {}
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        serialized[key] = value
    return serialized


def call_api(
    client: httpx.Client,
    http_method: str,
    path: str,
    params: Optional[Dict[str, Any]] = None,
    log: Optional[logging.Logger] = None,
) -> Dict[str, Any]:
    """Perform one Slack API call and return the parsed envelope.

    GET parameters go in the query string, POST parameters in a form body.

    Raises:
        SlackApiError: The envelope's ``ok`` flag is not true.
        SlackTransportError: The request failed or the body was not JSON.
    """
    log = log or logger
    data = serialize_params(params)
    try:
        if http_method == "GET":
            response = client.get(path, params=data or None)
        else:
            response = client.post(path, data=data)
        result = response.json()
    except httpx.HTTPError as e:
        log.error(f"Error requesting Slack API {path}: {e}")
        raise SlackTransportError(f"Request to {path} failed: {e}", cause=e) from e
    except ValueError as e:
        log.error(f"Invalid JSON from Slack API {path} (HTTP {response.status_code}): {e}")
        raise SlackTransportError(f"Invalid JSON from {path}: {e}", cause=e) from e

    if not isinstance(result, dict):
        log.error(f"Unexpected response from Slack API {path}: {result!r}")
        raise SlackTransportError(f"Unexpected response from {path}")

    if result.get("ok") is not True:
        raise SlackApiError(result.get("error") or "unknown_error", response=result)

    return result
