import json

import pytest

from crs_slack.blocks import ImageBlock, ImageUrl, image_blocks, section_block, serialize_blocks


def test_image_block_holds_url_and_alt_text():
    image = ImageBlock(url="https://example.com/img.png", alt_text="img")

    assert image.url == "https://example.com/img.png"
    assert image.alt_text == "img"
    assert image.to_block() == {"type": "image", "image_url": "https://example.com/img.png", "alt_text": "img"}


def test_image_block_is_immutable():
    image = ImageUrl(url="https://example.com/img.png", alt_text="img")

    with pytest.raises(AttributeError):
        image.url = "https://example.com/other.png"


def test_section_block():
    assert section_block("*bold*") == {"type": "section", "text": {"type": "mrkdwn", "text": "*bold*"}}


def test_serialize_blocks_keeps_order_and_unicode():
    blocks = [section_block("結果"), *image_blocks([ImageBlock("https://a/1.png", "一"), ImageBlock("https://a/2.png", "二")])]

    serialized = serialize_blocks(blocks)

    assert "結果" in serialized
    assert json.loads(serialized) == blocks


def test_serialize_blocks_passes_strings_through():
    raw = '[{"type": "divider"}]'
    assert serialize_blocks(raw) is raw
