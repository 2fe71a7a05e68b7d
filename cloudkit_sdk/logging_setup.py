"""
Structured JSON Logging for CloudKit SDK

Provides a JSON formatter for structured logging output.
"""

import logging
import sys
import json
from typing import Any, Dict


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": int(record.created * 1000),  # milliseconds
            "name": record.name,
            "level": record.levelname,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        if hasattr(record, "provider"):
            payload["provider"] = record.provider

        if hasattr(record, "request_id"):
            payload["request_id"] = record.request_id

        return json.dumps(payload, default=str)


def setup_structured_logger(level: int = logging.INFO) -> None:
    """
    Configure structured JSON logging for the SDK.

    Args:
        level: Logging level (default: logging.INFO)

    Example:
        >>> from cloudkit_sdk.logging_setup import setup_structured_logger
        >>> setup_structured_logger(logging.DEBUG)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    sdk_logger = logging.getLogger("cloudkit_sdk")
    sdk_logger.setLevel(level)
    sdk_logger.handlers = [handler]
    sdk_logger.propagate = False


def setup_logging(debug: bool = False) -> None:
    """
    Setup plain logging for SDK

    Args:
        debug: Enable debug level logging
    """
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Redact sensitive values before they reach a log line.

    Args:
        data: Dictionary to sanitize (headers, payloads)

    Returns:
        Sanitized copy

    Example:
        >>> sanitize_for_logging({"X-Auth-Token": "abc", "Accept": "application/json"})
        {'X-Auth-Token': '***REDACTED***', 'Accept': 'application/json'}
    """
    sensitive_keys = {"apikey", "api_key", "token", "secret", "password", "authorization"}
    sanitized = {}

    for key, value in data.items():
        if any(sensitive in key.lower() for sensitive in sensitive_keys):
            sanitized[key] = "***REDACTED***"
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value

    return sanitized
