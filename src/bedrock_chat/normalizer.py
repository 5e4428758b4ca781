"""Inbound request normalization.

The body is untrusted. Anything we cannot use falls back to DEFAULT_PROMPT:
- missing / empty body
- body that is not JSON (or not valid base64 when isBase64Encoded is set)
- JSON that is not an object, or whose "prompt" is missing, not a string, or empty

A usable prompt is passed through verbatim: no trimming, no length cap.
"""
from __future__ import annotations

import json

from .logging_util import get_logger
from .types import InboundRequest, PromptResult

logger = get_logger(__name__)

DEFAULT_PROMPT = "Hello from Bedrock!"

def _default(reason: str) -> PromptResult:
    return PromptResult(prompt=DEFAULT_PROMPT, source="default", reason=reason)

def normalize_prompt(request: InboundRequest) -> PromptResult:
    try:
        body = request.decoded_body()
    except ValueError as e:
        return _default(str(e))

    if not body:
        return _default("empty body")

    try:
        parsed = json.loads(body)
    except (ValueError, RecursionError) as e:
        return _default(f"body is not JSON: {e}")

    if not isinstance(parsed, dict):
        return _default(f"body is not a JSON object: {type(parsed).__name__}")

    prompt = parsed.get("prompt")
    if not isinstance(prompt, str):
        return _default("prompt missing or not a string")
    if not prompt:
        return _default("prompt is empty")

    return PromptResult(prompt=prompt, source="request")
