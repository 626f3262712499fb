"""Constants for the crs-slack client."""

from pathlib import Path

SLACK_API_BASE_URL = "https://slack.com/api/"
DEFAULT_TIMEOUT = 30.0

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

CONFIG_FILE = Path("config.yaml")

# Environment variables read by crs_slack.config
TOKEN_ENV = "SLACK_API_TOKEN"
TIMEOUT_ENV = "SLACK_API_TIMEOUT"
CONFIG_FILE_ENV = "SLACK_CONFIG_FILE"
DEMO_USER_ENV = "SLACK_DEMO_USER_ID"
