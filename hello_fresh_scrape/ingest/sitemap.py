"""Recipe collection listing from the Hello Fresh sitemap."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from lxml import etree

from hello_fresh_scrape.errors import SitemapError
from hello_fresh_scrape.ingest.fetch import fetch_url
from hello_fresh_scrape.settings import settings

logger = logging.getLogger(__name__)


def _local(tag) -> str:
    if not isinstance(tag, str):
        return ""
    return etree.QName(tag).localname


def urls_from_sitemap(xml: Union[bytes, str]) -> List[str]:
    """Return the <url><loc> values of a <urlset> sitemap in document order."""
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    try:
        root = etree.fromstring(xml)
    except etree.XMLSyntaxError as exc:
        raise SitemapError(f"sitemap is not valid XML: {exc}") from exc
    if _local(root.tag) != "urlset":
        raise SitemapError(f"expected <urlset> sitemap, got <{_local(root.tag)}>")
    urls = []
    for url in root:
        if _local(url.tag) != "url":
            continue
        for loc in url:
            if _local(loc.tag) == "loc" and loc.text:
                urls.append(loc.text.strip())
    return urls


def collections(url: Optional[str] = None) -> List[str]:
    """Fetch the recipe collections sitemap and list its page URLs."""
    url = url or settings.COLLECTIONS_SITEMAP_URL
    text, _ = fetch_url(url)
    urls = urls_from_sitemap(text)
    logger.info("Sitemap %s lists %d collections", url, len(urls))
    return urls


def is_collection_page(page: str, collection_urls: Iterable[str]) -> bool:
    """True when page is one of the listed collection URLs (trailing slash ignored)."""
    wanted = page.strip().rstrip("/")
    return any(c.strip().rstrip("/") == wanted for c in collection_urls)
