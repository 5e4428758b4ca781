"""AWS Lambda entrypoint (API Gateway REST proxy integration, POST /chat).

Design goals:
- Keep this file small and stable.
- Delegate all real logic to src/bedrock_chat so the same pipeline runs from the CLI and from Lambda.

Expected event shape (minimal):
   {"body": "{\"prompt\":\"Say hi\"}"}
   The body may be missing, empty, base64-encoded (isBase64Encoded=true) or not JSON at all;
   the default prompt is used in those cases.

Return:
- 200: body = JSON string of {"region", "modelId", "prompt", "text"}
- 500: body = JSON string of {"message", "errorName", "errorMessage"}
"""
from typing import Any, Dict

from src.bedrock_chat.adapters.base import InvocationError
from src.bedrock_chat.client import ChatClient
from src.bedrock_chat.config import load_config
from src.bedrock_chat.formatter import format_failure
from src.bedrock_chat.logging_util import get_logger
from src.bedrock_chat.types import InboundRequest

logger = get_logger(__name__)

# Resolved once per container; reused by warm invocations.
_config = load_config()
_client = ChatClient(_config)

def lambda_handler(event: Dict[str, Any], context: Any):
    try:
        req = InboundRequest.from_event(event)
        return _client.run(req, request_id=getattr(context, "aws_request_id", None))

    except Exception as e:
        logger.exception("lambda_handler fatal error: %s", e)
        return format_failure(InvocationError.from_exception(e))
