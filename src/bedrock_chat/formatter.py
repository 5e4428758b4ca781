"""API Gateway proxy responses.

Only two shapes leave the function:
- 200 {region, modelId, prompt, text}
- 500 {message, errorName, errorMessage}; prompt and config are never echoed on failure
"""
from __future__ import annotations

import json
from typing import Any, Dict

from .adapters.base import InvocationError
from .types import InferenceConfig

FAILURE_MESSAGE = "Bedrock invoke failed"

_HEADERS = {"content-type": "application/json"}

def _response(status: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status,
        "headers": dict(_HEADERS),
        "body": json.dumps(body),
    }

def format_success(config: InferenceConfig, prompt: str, text: str) -> Dict[str, Any]:
    return _response(
        200,
        {
            "region": config.region,
            "modelId": config.model_id,
            "prompt": prompt,
            "text": text,
        },
    )

def format_failure(err: InvocationError) -> Dict[str, Any]:
    return _response(
        500,
        {
            "message": FAILURE_MESSAGE,
            "errorName": err.error_name,
            "errorMessage": err.error_message,
        },
    )
