"""Request-scoped value types.

Everything here lives for one invocation only:
- nothing is cached between requests
- InferenceConfig is frozen; it is resolved once and passed in
"""
from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Union

ANTHROPIC_VERSION = "bedrock-2023-05-31"
DEFAULT_MAX_TOKENS = 200
DEFAULT_TEMPERATURE = 0.7

PromptSource = Literal["request", "default"]

@dataclass(frozen=True)
class InferenceConfig:
    region: str
    model_id: str

@dataclass
class InboundRequest:
    body: Optional[str] = None
    is_base64_encoded: bool = False

    @classmethod
    def from_event(cls, event: Any) -> "InboundRequest":
        if not isinstance(event, dict):
            return cls()
        body = event.get("body")
        return cls(
            body=body if isinstance(body, str) else None,
            is_base64_encoded=bool(event.get("isBase64Encoded")),
        )

    def decoded_body(self) -> Optional[str]:
        """Body text with API Gateway base64 encoding undone. Raises ValueError on bad input."""
        if self.body is None or not self.is_base64_encoded:
            return self.body
        try:
            return base64.b64decode(self.body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValueError(f"body is not valid base64 utf-8: {e}") from e

@dataclass(frozen=True)
class PromptResult:
    prompt: str
    source: PromptSource
    # Why the default was used; None when the prompt came from the request.
    reason: Optional[str] = None

    @property
    def is_default(self) -> bool:
        return self.source == "default"

@dataclass(frozen=True)
class GenerationOptions:
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE

@dataclass
class InferenceRequest:
    model_id: str
    messages: List[Dict[str, Any]]
    anthropic_version: str = ANTHROPIC_VERSION
    options: GenerationOptions = field(default_factory=GenerationOptions)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "anthropic_version": self.anthropic_version,
            "max_tokens": self.options.max_tokens,
            "temperature": self.options.temperature,
            "messages": self.messages,
        }

    def to_body(self) -> str:
        # ASCII-escaped so any str prompt, lone surrogates included, encodes to bytes.
        return json.dumps(self.to_payload(), separators=(",", ":"))

@dataclass(frozen=True)
class TextBlock:
    text: str
    type: Literal["text"] = "text"

@dataclass(frozen=True)
class OtherBlock:
    """Any block kind we do not render (image, tool_use, ...). Kept, never an error."""
    type: Any
    raw: Any = None

ContentBlock = Union[TextBlock, OtherBlock]

@dataclass
class ContentEnvelope:
    # None when the provider sent no content list at all.
    content: Optional[List[ContentBlock]] = None
