"""HTTP fetchers for Hello Fresh pages and sitemaps."""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Tuple

import requests

from hello_fresh_scrape.errors import StreamError
from hello_fresh_scrape.settings import settings


logger = logging.getLogger(__name__)


def _headers() -> dict:
    return {"User-Agent": settings.USER_AGENT}


def fetch_url(url: str, timeout: Optional[int] = None) -> Tuple[str, str]:
    """GET the url with UA header and a timeout. Returns (text, final_url).

    Raises requests.HTTPError on non-200.
    """
    logger.debug("Fetching URL: %s", url)
    resp = requests.get(
        url, headers=_headers(), timeout=timeout or settings.HTTP_TIMEOUT, allow_redirects=True
    )
    resp.raise_for_status()
    logger.info("Fetched %s -> status %s", url, resp.status_code)
    return resp.text, resp.url


def open_page(url: str, timeout: Optional[int] = None) -> requests.Response:
    """Start a streaming GET for url. The caller must close the response.

    Raises requests.HTTPError on non-200.
    """
    logger.debug("Opening page: %s", url)
    resp = requests.get(
        url,
        headers=_headers(),
        timeout=timeout or settings.HTTP_TIMEOUT,
        allow_redirects=True,
        stream=True,
    )
    try:
        resp.raise_for_status()
    except requests.HTTPError:
        resp.close()
        raise
    logger.info("Opened %s -> status %s", url, resp.status_code)
    return resp


def iter_body(resp: requests.Response, chunk_size: Optional[int] = None) -> Iterator[bytes]:
    """Yield the decoded response body in chunks.

    Transport failures while reading surface as StreamError.
    """
    try:
        yield from resp.iter_content(chunk_size=chunk_size or settings.SCAN_CHUNK_SIZE)
    except requests.RequestException as exc:
        raise StreamError(f"reading {resp.url}: {exc}") from exc
