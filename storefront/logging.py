"""
Logging for the storefront API.

Usage:
    from storefront.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Theme published")
    logger.error("Publish failed", exc_info=True)

Customer data never reaches the logs in full: product ids and session
tokens are truncated, WhatsApp numbers are masked and free text (setting
keys, Cloudinary public ids) is escaped and shortened.
"""

import logging
import os
import re
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# supabase-py (httpx over HTTP/2) and the Cloudinary SDK (urllib3)
_CLIENT_LOGGERS = ("httpx", "httpcore", "hpack", "urllib3", "cloudinary")

_NON_DIGITS = re.compile(r"\D")


def _get_log_level() -> int:
    """Level from `LOG_LEVEL`, INFO when unset or unknown."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _is_hosted() -> bool:
    # Vercel adds its own timestamps to function logs
    return os.environ.get("VERCEL") == "1" or os.environ.get("ENV") == "production"


def _configure_root_logger() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = _get_log_level()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if _is_hosted() else LOG_FORMAT))
    root.addHandler(handler)

    # One line per Supabase query or upload otherwise
    for name in _CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a storefront logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger writing through the shared stdout handler
    """
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """Escape control characters that could forge log lines (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Shorten a product, category or user id for logging.

    Args:
        id_value: Identifier from a route parameter or a row (can be None)

    Returns:
        First 8 characters, escaped, or "N/A" when empty
    """
    if not id_value:
        return "N/A"
    return _escape_log_injection(str(id_value))[:8]


def sanitize_token_for_logging(token: str | None) -> str:
    """
    Identify a cart or preview session without leaking its bearer token.

    Args:
        token: Value of `X-Cart-Session` / `X-Preview-Session`

    Returns:
        First 6 characters followed by an ellipsis, or "N/A"
    """
    if not token:
        return "N/A"
    return _escape_log_injection(str(token))[:6] + "..."


def sanitize_phone_for_logging(number: str | None) -> str:
    """
    Mask a WhatsApp number, keeping its last three digits.

    Args:
        number: Phone number in any format ("+51 932-371-532")

    Returns:
        Masked digits ("********532"), or "N/A" when there are none
    """
    digits = _NON_DIGITS.sub("", number or "")
    if not digits:
        return "N/A"
    return "*" * max(len(digits) - 3, 0) + digits[-3:]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Escape and shorten free text such as setting keys or Cloudinary ids.

    Args:
        value: Text to log (can be None)
        max_length: Characters kept before "..." is appended

    Returns:
        Sanitized string or "N/A" when empty
    """
    if not value:
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_phone_for_logging",
    "sanitize_string_for_logging",
    "sanitize_token_for_logging",
]
