"""Invoker interface for the inference provider."""
from __future__ import annotations

from ..types import InferenceConfig, InferenceRequest

class InvocationError(Exception):
    """A failed model call, carrying the provider's error classification."""

    def __init__(self, error_name: str, error_message: str):
        super().__init__(f"{error_name}: {error_message}")
        self.error_name = error_name
        self.error_message = error_message

    @classmethod
    def from_exception(cls, exc: BaseException) -> "InvocationError":
        if isinstance(exc, cls):
            return exc
        return cls(type(exc).__name__, str(exc))

class BaseInvoker:
    def invoke(self, request: InferenceRequest, config: InferenceConfig) -> bytes:
        raise NotImplementedError
