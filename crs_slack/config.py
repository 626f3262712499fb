"""Client configuration from config.yaml and the environment."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import SlackConfigError
from .utils.const import (
    CONFIG_FILE,
    CONFIG_FILE_ENV,
    DEFAULT_TIMEOUT,
    DEMO_USER_ENV,
    TIMEOUT_ENV,
    TOKEN_ENV,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlackConfig:
    api_token: str
    timeout: float = DEFAULT_TIMEOUT
    demo_user_id: Optional[str] = None
    demo_wait_seconds: float = 5.0


def _load_file(path: Path) -> Dict[str, Any]:
    """Read the ``slack`` section of a YAML config file, if present."""
    if not path.exists():
        logger.debug(f"No config file at {path}")
        return {}
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise SlackConfigError(f"Invalid config file {path}: {e}") from e

    section = data.get("slack") if isinstance(data, dict) else None
    if section is None:
        logger.warning(f"{path} exists but has no 'slack' section")
        return {}
    if not isinstance(section, dict):
        raise SlackConfigError(f"'slack' section of {path} must be a mapping")
    return section


def _as_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise SlackConfigError(f"{name} must be a number, got {value!r}") from e


def load_config(path: Optional[Path] = None, env: Optional[Dict[str, str]] = None) -> SlackConfig:
    """Build a SlackConfig; environment variables override the file.

    Raises:
        SlackConfigError: No token is configured, or a value is malformed.
    """
    env = os.environ if env is None else env
    if path is None:
        path = Path(env[CONFIG_FILE_ENV]) if env.get(CONFIG_FILE_ENV) else CONFIG_FILE

    settings = _load_file(path)

    api_token = env.get(TOKEN_ENV) or settings.get("api_token")
    if not api_token:
        raise SlackConfigError(f"Slack API token not set: export {TOKEN_ENV} or add slack.api_token to {path}")

    timeout = env.get(TIMEOUT_ENV) or settings.get("timeout", DEFAULT_TIMEOUT)
    demo_wait = settings.get("demo_wait_seconds", SlackConfig.demo_wait_seconds)

    return SlackConfig(
        api_token=api_token,
        timeout=_as_float(timeout, "timeout"),
        demo_user_id=env.get(DEMO_USER_ENV) or settings.get("demo_user_id"),
        demo_wait_seconds=_as_float(demo_wait, "demo_wait_seconds"),
    )
