"""ChatClient: single-prompt orchestrator.

normalize -> build request -> invoke Bedrock -> extract text -> format response.
Every outcome is returned as an API Gateway proxy response; nothing raises out of run().
"""
from __future__ import annotations

import time
from typing import Any, Dict, Optional

from .adapters.base import BaseInvoker, InvocationError
from .adapters.bedrock import BedrockInvoker
from .extractor import decode_envelope, extract_text
from .formatter import format_failure, format_success
from .logging_util import get_logger, log_step
from .normalizer import normalize_prompt
from .request_builder import build_inference_request
from .types import InboundRequest, InferenceConfig

logger = get_logger(__name__)

class ChatClient:
    def __init__(self, config: InferenceConfig, invoker: Optional[BaseInvoker] = None):
        self.config = config
        self.invoker = invoker or BedrockInvoker()

    def run(self, request: InboundRequest, request_id: Optional[str] = None) -> Dict[str, Any]:
        t0 = time.time()

        log_step(logger, "1", "normalize prompt request_id=%s", request_id)
        result = normalize_prompt(request)
        if result.is_default:
            logger.info("using default prompt: %s", result.reason)
        logger.debug("prompt=%r", result.prompt)

        log_step(logger, "2", "build request model=%s", self.config.model_id)
        inference_request = build_inference_request(result.prompt, self.config)

        try:
            log_step(logger, "3", "call provider region=%s", self.config.region)
            t_call = time.time()
            raw = self.invoker.invoke(inference_request, self.config)
            logger.info("call_ms=%d", int((time.time() - t_call) * 1000))

            log_step(logger, "4", "extract text")
            text = extract_text(decode_envelope(raw))

        except Exception as e:
            err = InvocationError.from_exception(e)
            logger.exception("Bedrock invoke failed: %s", err)
            return format_failure(err)

        log_step(logger, "5", "format response total_ms=%d", int((time.time() - t0) * 1000))
        return format_success(self.config, result.prompt, text)
