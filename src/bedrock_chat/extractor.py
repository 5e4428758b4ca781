"""Model output decoding.

Claude returns structured content blocks. We keep only the text blocks and join them.
- Unknown block kinds are parsed as OtherBlock and skipped, never rejected.
- A missing or non-list "content" yields empty text.
- Bytes that are not UTF-8 JSON raise; the caller treats that like a failed call.
"""
from __future__ import annotations

import json
from typing import Any, List

from .types import ContentBlock, ContentEnvelope, OtherBlock, TextBlock

def parse_block(block: Any) -> ContentBlock:
    if isinstance(block, dict):
        if block.get("type") == "text" and isinstance(block.get("text"), str):
            return TextBlock(text=block["text"])
        return OtherBlock(type=block.get("type"), raw=block)
    return OtherBlock(type=None, raw=block)

def decode_envelope(raw: bytes) -> ContentEnvelope:
    data = json.loads(raw.decode("utf-8"))

    content = data.get("content") if isinstance(data, dict) else None
    if not isinstance(content, list):
        return ContentEnvelope(content=None)

    blocks: List[ContentBlock] = [parse_block(b) for b in content]
    return ContentEnvelope(content=blocks)

def extract_text(envelope: ContentEnvelope) -> str:
    if envelope.content is None:
        return ""
    return "".join(b.text for b in envelope.content if isinstance(b, TextBlock))
