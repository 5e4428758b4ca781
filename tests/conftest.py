import io
import json

import pytest
from botocore.exceptions import ClientError

from src.bedrock_chat.adapters.bedrock import BedrockInvoker
from src.bedrock_chat.types import InferenceConfig

class FakeBedrockClient:
    """Stands in for boto3's bedrock-runtime client."""

    def __init__(self, payload=None, raw=None, error=None):
        if raw is None and payload is not None:
            raw = json.dumps(payload).encode("utf-8")
        self.raw = raw
        self.error = error
        self.calls = []

    def invoke_model(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"body": io.BytesIO(self.raw), "contentType": "application/json"}

def client_error(code, message="boom"):
    return ClientError({"Error": {"Code": code, "Message": message}}, "InvokeModel")

@pytest.fixture
def config():
    return InferenceConfig(region="us-west-2", model_id="anthropic.claude-3-haiku-20240307-v1:0")

@pytest.fixture
def make_invoker():
    def _make(fake):
        return BedrockInvoker(client_factory=lambda region: fake)
    return _make
