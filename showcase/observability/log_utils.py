"""
Structured logging helpers.

Turns request context (filenames, content types, label lists, raw image
bytes, enum states) into short log-safe strings, and tags storage failures
with the AWS error code so signing problems can be grepped for.

Dependencies: logging (stdlib), botocore
System role: Logging helper functions
"""

import logging
from enum import Enum
from typing import Any

from botocore.exceptions import ClientError

from showcase.core.exceptions import ShowcaseException


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Convert a context value to a bounded string.

    Image payloads are summarised by size, never dumped.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Log-safe representation
    """
    if value is None:
        return "None"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"<{len(value)} bytes>"
    if isinstance(value, Enum):
        val_str = str(value.value)
    elif isinstance(value, str):
        val_str = value
    elif isinstance(value, (list, tuple, set)):
        val_str = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        val_str = f"dict({len(value)} keys)"
    else:
        try:
            val_str = str(value)
        except Exception as e:
            return f"<unable to log: {type(e).__name__}>"

    if len(val_str) > max_length:
        return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
    return val_str


def describe_error(exc: BaseException) -> dict[str, str]:
    """
    Summarise an exception for the `extra=` mapping.

    Adds `aws_error_code` for botocore ClientError and `operation` for
    ShowcaseException subclasses that carry one.
    """
    summary = {
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(str(exc)),
    }
    if isinstance(exc, ClientError):
        summary["aws_error_code"] = exc.response.get("Error", {}).get("Code", "Unknown")
    elif isinstance(exc, ShowcaseException) and "operation" in exc.details:
        summary["operation"] = safe_log_value(exc.details["operation"])
    return summary


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """Log `message` with every context value passed through safe_log_value."""
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    logger.log(level, message, extra=safe_context)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with traceback, error summary and request context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being handled
        **context: e.g. file_name, document_id
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context.update(describe_error(exc))
    logger.error(message, exc_info=exc, extra=safe_context)
