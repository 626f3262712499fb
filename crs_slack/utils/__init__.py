"""Utility functions for the crs-slack client."""

from .const import (
    SLACK_API_BASE_URL,
    DEFAULT_TIMEOUT,
    FORM_CONTENT_TYPE,
    CONFIG_FILE,
    TOKEN_ENV,
    TIMEOUT_ENV,
    CONFIG_FILE_ENV,
    DEMO_USER_ENV,
)

from .api import (
    get_client,
    call_api,
    serialize_params,
)

from .formatting import (
    dump_yaml,
    error_payload,
    parse_image_spec,
    format_directory,
)
