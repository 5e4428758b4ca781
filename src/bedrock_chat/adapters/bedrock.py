"""Amazon Bedrock InvokeModel adapter."""
from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..logging_util import get_logger
from ..types import InferenceConfig, InferenceRequest
from .base import BaseInvoker, InvocationError

logger = get_logger(__name__)

# A failed call is terminal for the request; botocore must not retry behind our back.
_BOTO_CONFIG = Config(retries={"total_max_attempts": 1, "mode": "standard"})

def _default_client_factory(region: str) -> Any:
    return boto3.client("bedrock-runtime", region_name=region, config=_BOTO_CONFIG)

def _client_error_fields(e: ClientError):
    err = (e.response or {}).get("Error") or {}
    name = err.get("Code") or type(e).__name__
    message = err.get("Message") or str(e)
    return name, message

class BedrockInvoker(BaseInvoker):
    def __init__(self, client_factory: Optional[Callable[[str], Any]] = None):
        self._client_factory = client_factory or _default_client_factory
        # Clients are reused across warm invocations when the region matches.
        self._clients: Dict[str, Any] = {}

    def _client(self, region: str) -> Any:
        client = self._clients.get(region)
        if client is None:
            client = self._client_factory(region)
            self._clients[region] = client
        return client

    def invoke(self, request: InferenceRequest, config: InferenceConfig) -> bytes:
        try:
            body = request.to_body().encode("utf-8")
            logger.debug("invoke_model region=%s model=%s bytes=%d", config.region, request.model_id, len(body))

            resp = self._client(config.region).invoke_model(
                modelId=request.model_id,
                contentType="application/json",
                accept="application/json",
                body=body,
            )
            return resp["body"].read()
        except ClientError as e:
            name, message = _client_error_fields(e)
            raise InvocationError(name, message) from e
        except BotoCoreError as e:
            raise InvocationError(type(e).__name__, str(e)) from e
