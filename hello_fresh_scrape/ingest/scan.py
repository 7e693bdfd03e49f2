"""Locate the Next.js data payload inside a Hello Fresh page.

The page embeds its server-rendered data as JSON text in::

    <script id="__NEXT_DATA__" type="application/json">{...}</script>

The scan is a single streaming pass over the markup; nothing is fetched or
written.
"""

from __future__ import annotations

import logging
from typing import IO, Iterable, Iterator, Optional, Tuple, Union

from lxml import etree

from hello_fresh_scrape.errors import PayloadNotFoundError, StreamError
from hello_fresh_scrape.settings import settings

logger = logging.getLogger(__name__)

NEXT_DATA_ID = "__NEXT_DATA__"
NEXT_DATA_TYPE = "application/json"

Source = Union[bytes, str, IO[bytes], Iterable[bytes]]


def _chunks(source: Source, chunk_size: int) -> Iterator[bytes]:
    if isinstance(source, str):
        yield source.encode("utf-8")
        return
    if isinstance(source, (bytes, bytearray)):
        yield bytes(source)
        return
    read = getattr(source, "read", None)
    if read is None:
        yield from source
        return
    while True:
        chunk = read(chunk_size)
        if not chunk:
            return
        yield chunk


def is_next_data_tag(tag: str, attrs: Iterable[Tuple[str, str]]) -> bool:
    """True for <script id="__NEXT_DATA__" type="application/json" ...>.

    Only the first two attributes count, in that order.
    """
    if tag != "script":
        return False
    attrs = list(attrs)
    if not attrs or attrs[0] != ("id", NEXT_DATA_ID):
        return False
    return len(attrs) > 1 and attrs[1] == ("type", NEXT_DATA_TYPE)


class _NextDataScan:
    """Tracks the first matching script across parser events."""

    def __init__(self) -> None:
        self.armed: Optional[etree._Element] = None

    def consume(self, events) -> Optional[str]:
        for action, el in events:
            if action == "start":
                if self.armed is None and is_next_data_tag(el.tag, el.attrib.items()):
                    logger.debug("Found %s script on line %s", NEXT_DATA_ID, el.sourceline)
                    self.armed = el
            elif el is self.armed:
                if not el.text:
                    raise PayloadNotFoundError(f"{NEXT_DATA_ID} script is empty")
                return el.text
        return None


def extract_next_data(source: Source, chunk_size: Optional[int] = None) -> bytes:
    """Return the raw text of the page's __NEXT_DATA__ script as UTF-8 bytes.

    ``source`` is a binary stream (anything with ``read``), an iterable of
    byte chunks, or a whole document as bytes/str. The scan stops as soon as
    the payload text is complete.

    Raises StreamError when reading or tokenizing the source fails and
    PayloadNotFoundError when the page has no such script.
    """
    chunk_size = chunk_size or settings.SCAN_CHUNK_SIZE
    parser = etree.HTMLPullParser(events=("start", "end"), encoding="utf-8")
    scan = _NextDataScan()
    read = 0
    try:
        for chunk in _chunks(source, chunk_size):
            read += len(chunk)
            parser.feed(chunk)
            text = scan.consume(parser.read_events())
            if text is not None:
                logger.debug("Payload found after %d bytes (%d chars)", read, len(text))
                return text.encode("utf-8")
    except OSError as exc:
        raise StreamError(f"reading page: {exc}") from exc
    except etree.LxmlError as exc:
        raise StreamError(f"tokenizing page: {exc}") from exc

    # a truncated document may still hold the script text
    try:
        parser.close()
    except etree.LxmlError as exc:
        raise PayloadNotFoundError(f"recipe props data not found ({exc})") from exc
    text = scan.consume(parser.read_events())
    if text is not None:
        return text.encode("utf-8")
    logger.debug("No %s script in %d bytes of markup", NEXT_DATA_ID, read)
    raise PayloadNotFoundError()
