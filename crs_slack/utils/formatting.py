"""Formatting and Parsing."""

from typing import Any, Dict

import yaml

from ..blocks import ImageBlock
from ..users import UserRecord


def dump_yaml(data: Any) -> str:
    """Render command output the way every command prints it."""
    return yaml.dump(data, indent=2, sort_keys=False, allow_unicode=True)


def error_payload(error: Exception) -> Dict[str, Any]:
    """Format a failure for stderr, keeping the remote code when there is one."""
    payload = {"ok": False, "error": getattr(error, "code", None) or str(error)}
    if getattr(error, "context", None):
        payload["context"] = error.context
    return payload


def parse_image_spec(spec: str) -> ImageBlock:
    """Parse ``URL`` or ``URL|ALT TEXT`` into an ImageBlock.

    Without alt text the URL itself is used.
    """
    url, sep, alt_text = spec.partition("|")
    url = url.strip()
    if not url:
        raise ValueError(f"Image spec has no URL: {spec!r}")
    return ImageBlock(url=url, alt_text=alt_text.strip() if sep else url)


def format_directory(directory: Dict[str, UserRecord]) -> Dict[str, Dict[str, str]]:
    """Turn a user directory into plain mappings for YAML output."""
    return {name: record.to_dict() for name, record in directory.items()}
