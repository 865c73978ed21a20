"""
Logging setup for the storefront.

A single stdout handler is attached to the root logger on first import.
Modules log through get_logger(__name__). Shopper-supplied values (session
ids, phone numbers) go through the sanitizers first.
"""

import logging
import os
import sys
from functools import cache

_FORMATS = {
    True: "%(levelname)s - %(name)s - %(message)s",  # Vercel adds its own timestamps
    False: "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


def _configure_root_logger() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMATS[os.environ.get("VERCEL") == "1"]))
    root.setLevel(level)
    root.addHandler(handler)

    # Supabase requests go through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _escape(value) -> str:
    """Neutralize newlines and control characters (CWE-117)."""
    return (
        str(value).replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | None) -> str:
    """Escaped session/product id, first 8 chars, or "N/A"."""
    if not id_value:
        return "N/A"
    return _escape(id_value)[:8]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Escaped free text cut to max_length with a trailing "...", or "N/A"."""
    if not value:
        return "N/A"
    safe_value = _escape(value)
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
