"""Bedrock request assembly (Anthropic Messages schema).

Claude 3 on Bedrock requires:
- anthropic_version on every request
- messages[].content as a list of typed blocks, not a plain string
"""
from __future__ import annotations

from typing import Any, Dict, List

from .types import GenerationOptions, InferenceConfig, InferenceRequest

def user_text_message(text: str) -> Dict[str, Any]:
    return {"role": "user", "content": [{"type": "text", "text": text}]}

def build_inference_request(prompt: str, config: InferenceConfig) -> InferenceRequest:
    messages: List[Dict[str, Any]] = [user_text_message(prompt)]
    return InferenceRequest(
        model_id=config.model_id,
        messages=messages,
        options=GenerationOptions(),
    )
