"""Application settings loaded from environment (and .env).

This module provides a small Settings holder backed by environment variables.
The CLI loads .env before importing it; import `settings` from other modules.
"""
from __future__ import annotations

from dataclasses import dataclass
import os


def _get(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    if v is None:
        return default
    return v


def _get_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if not v:
        return default
    try:
        return int(v)
    except ValueError:
        raise RuntimeError(f"Environment variable {name} must be an integer, got {v!r}")


@dataclass
class Settings:
    # Hello Fresh endpoints
    RECIPE_PAGE: str = _get("RECIPE_PAGE", "https://www.hellofresh.com/recipes")
    COLLECTIONS_SITEMAP_URL: str = _get(
        "COLLECTIONS_SITEMAP_URL",
        "https://www.hellofresh.com/sitemap_recipe_collections.xml",
    )

    # HTTP
    USER_AGENT: str = _get("USER_AGENT", "hello-fresh-scrape/1.0 (+https://example.com)")
    HTTP_TIMEOUT: int = _get_int("HTTP_TIMEOUT", 20)

    # Bytes read from the page body per tokenizer feed
    SCAN_CHUNK_SIZE: int = _get_int("SCAN_CHUNK_SIZE", 64 * 1024)

    # Logging configuration
    # LOG_LEVEL can be DEBUG, INFO, WARNING, ERROR, or CRITICAL
    LOG_LEVEL: str = _get("LOG_LEVEL", "WARNING")
    # Optional path to write logs to a file; if unset, logs go to stderr
    LOG_FILE: str | None = _get("LOG_FILE", None)


settings = Settings()
