"""Runtime configuration.

Only two values are read, both with defaults that match the deployed stack:
- BEDROCK_REGION: region of the bedrock-runtime endpoint
- MODEL_ID: Bedrock model identifier

Resolve once at process start and pass the result into ChatClient.
"""
from __future__ import annotations

import os
from typing import Mapping, Optional

from .types import InferenceConfig

DEFAULT_REGION = "us-east-1"
DEFAULT_MODEL_ID = "anthropic.claude-3-sonnet-20240229-v1:0"

def _read(environ: Mapping[str, str], key: str, default: str) -> str:
    v = (environ.get(key) or "").strip()
    return v or default

def load_config(environ: Optional[Mapping[str, str]] = None) -> InferenceConfig:
    if environ is None:
        environ = os.environ
    return InferenceConfig(
        region=_read(environ, "BEDROCK_REGION", DEFAULT_REGION),
        model_id=_read(environ, "MODEL_ID", DEFAULT_MODEL_ID),
    )
