"""Content blocks for rich Slack messages."""

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Union

Block = Dict[str, Any]


@dataclass(frozen=True)
class ImageBlock:
    """An image to attach to a message, shown with alternative text."""

    url: str
    alt_text: str

    def to_block(self) -> Block:
        return {"type": "image", "image_url": self.url, "alt_text": self.alt_text}


# Name used by the image-only reply form
ImageUrl = ImageBlock


def section_block(text: str) -> Block:
    """Build a mrkdwn text section."""
    return {"type": "section", "text": {"type": "mrkdwn", "text": text}}


def image_blocks(images: Iterable[ImageBlock]) -> List[Block]:
    return [image.to_block() for image in images]


def serialize_blocks(blocks: Union[str, Iterable[Block]]) -> str:
    """Serialize blocks to the JSON string sent in the ``blocks`` form field.

    Strings are assumed to be serialized already and pass through untouched.
    """
    if isinstance(blocks, str):
        return blocks
    return json.dumps(list(blocks), ensure_ascii=False)
