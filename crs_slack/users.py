"""Workspace user directory built from ``users.list``."""

import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional

# str patterns are Unicode aware, so \s also covers U+3000 (full-width space)
WHITESPACE_PATTERN = re.compile(r"\s")


@dataclass(frozen=True)
class UserRecord:
    id: str
    display_name: str
    name: str
    real_name: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def clean_display_name(display_name: Optional[str]) -> str:
    """Remove every whitespace character, half- or full-width, from a name."""
    return WHITESPACE_PATTERN.sub("", display_name or "").strip()


def build_user_directory(members: Iterable[Dict[str, Any]]) -> Dict[str, UserRecord]:
    """Index active human members by cleaned display name.

    Bots, deleted accounts and members without a display name are skipped.
    Names that collide after cleaning keep the last member seen.
    """
    directory: Dict[str, UserRecord] = {}
    for member in members:
        if member.get("is_bot") or member.get("deleted"):
            continue

        profile = member.get("profile") or {}
        display_name = clean_display_name(profile.get("display_name"))
        if not display_name:
            continue

        directory[display_name] = UserRecord(
            id=member.get("id") or "",
            display_name=display_name,
            name=member.get("name") or "",
            real_name=member.get("real_name") or "",
        )
    return directory
