"""Local runner for the chat pipeline.

Usage examples:
- Raw body string (passed through verbatim, malformed bodies included):
  python cli.py "{\"prompt\":\"Say hi\"}"

- JSON or YAML file (prefix with @). A mapping with a "body" key is a full Lambda event,
  anything else is sent as the body:
  python cli.py @event.yaml

- Show the Bedrock request without calling the model:
  python cli.py "{\"prompt\":\"Say hi\"}" --dry-run --pretty

Exit codes: 0 on a 200 response, 1 on a 500 response, 2 if the input file cannot be read.
"""
import argparse
import dataclasses
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from src.bedrock_chat.adapters.base import BaseInvoker
from src.bedrock_chat.client import ChatClient
from src.bedrock_chat.config import load_config
from src.bedrock_chat.logging_util import get_logger
from src.bedrock_chat.normalizer import normalize_prompt
from src.bedrock_chat.request_builder import build_inference_request
from src.bedrock_chat.types import InboundRequest

logger = get_logger(__name__)

def _load_event(arg: str) -> Dict[str, Any]:
    if not arg.startswith("@"):
        return {"body": arg}

    p = Path(arg[1:])
    data = yaml.safe_load(p.read_text(encoding="utf-8"))
    if isinstance(data, dict) and "body" in data:
        return data
    if isinstance(data, str):
        return {"body": data}
    return {"body": json.dumps(data, ensure_ascii=False)}

def main(argv: Optional[List[str]] = None, invoker: Optional[BaseInvoker] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("input", help="raw body string or @path/to/event.(json|yaml)")
    ap.add_argument("--region", help="override BEDROCK_REGION")
    ap.add_argument("--model-id", help="override MODEL_ID")
    ap.add_argument("--dry-run", action="store_true", help="Print the Bedrock request instead of calling it")
    ap.add_argument("--pretty", action="store_true", help="Pretty print the output JSON")
    args = ap.parse_args(argv)

    try:
        event = _load_event(args.input)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to read input: %s", e)
        return 2

    config = load_config()
    if args.region:
        config = dataclasses.replace(config, region=args.region)
    if args.model_id:
        config = dataclasses.replace(config, model_id=args.model_id)

    req = InboundRequest.from_event(event)
    indent = 2 if args.pretty else None

    if args.dry_run:
        result = normalize_prompt(req)
        inference_request = build_inference_request(result.prompt, config)
        out = {
            "region": config.region,
            "modelId": inference_request.model_id,
            "promptSource": result.source,
            "payload": inference_request.to_payload(),
        }
        print(json.dumps(out, indent=indent))
        return 0

    client = ChatClient(config, invoker=invoker)
    resp = client.run(req, request_id="CLI")

    body = json.loads(resp["body"])
    print(json.dumps({"statusCode": resp["statusCode"], "body": body}, indent=indent))
    return 0 if resp["statusCode"] == 200 else 1

if __name__ == "__main__":
    sys.exit(main())
