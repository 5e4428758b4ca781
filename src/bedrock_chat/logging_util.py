"""Logging for the Lambda runtime and the local CLI.

- One StreamHandler per named logger; records do not propagate to the root logger,
  which the Lambda runtime already wires to CloudWatch (otherwise every line lands twice).
- Level comes from BEDROCK_CHAT_LOG_LEVEL (default INFO).
- log_step marks each pipeline stage as "[STEP n]" so a failed invocation is easy to locate.
"""
from __future__ import annotations

import logging
import os

_DEFAULT_LEVEL = os.environ.get("BEDROCK_CHAT_LOG_LEVEL", "INFO").upper()
_FORMAT = "[%(levelname)s] %(name)s:%(lineno)d - %(message)s"

def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(_DEFAULT_LEVEL)
    logger.propagate = False

    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(h)

    return logger

def log_step(logger: logging.Logger, step: str, msg: str, *args):
    logger.info("[STEP %s] " + msg, step, *args)
