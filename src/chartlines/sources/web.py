"""Source for charts published on web pages.

Most chord sites keep the chart in one or more ``<pre>`` blocks so that
chords stay aligned over the lyrics::

    <h1>Song Title</h1>
    <pre>
    [Verse]
    C       G
    Hello there
    </pre>

Every ``<pre>`` block is collected in document order, separated by a blank
line.  ``<br>`` tags inside a block become line breaks; other inline tags
(``<b>``, ``<span class="chord">``, ...) contribute their text only.  Pages
without ``<pre>`` fall back to the first ``<textarea>`` (editor pages).

URLs serving ``text/plain`` are returned untouched.
"""

import logging

import httpx
from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from ..exceptions import FetchError, ParseError
from .base import ChartSource

logger = logging.getLogger(__name__)

_FETCH_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; chartlines)",
    "Accept": "text/html,application/xhtml+xml,text/plain;q=0.9,*/*;q=0.8",
}


class WebSource(ChartSource):
    """Source for chart pages served over http(s)."""

    def __init__(self):
        self.content_type = "text/html"

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return location.startswith(("http://", "https://"))

    def fetch(self, location: str) -> str:
        try:
            resp = httpx.get(
                location, headers=_FETCH_HEADERS, follow_redirects=True, timeout=15
            )
        except httpx.RequestError as exc:
            raise FetchError(location, 0) from exc
        if resp.status_code != 200:
            raise FetchError(location, resp.status_code)
        self.content_type = resp.headers.get("content-type", "text/html")
        logger.debug(
            "Fetched %s (%d bytes, %s)", location, len(resp.content), self.content_type
        )
        return resp.text

    def extract(self, payload: str, location: str) -> str:
        if self.content_type.startswith("text/plain"):
            return payload.replace("\r\n", "\n")

        soup = BeautifulSoup(payload, "html.parser")

        blocks = [_block_text(pre) for pre in soup.find_all("pre")]
        blocks = [b.strip("\n") for b in blocks if b.strip()]
        if blocks:
            logger.debug("Found %d <pre> block(s) in %s", len(blocks), location)
            return "\n\n".join(blocks).replace("\r\n", "\n")

        textarea = soup.find("textarea")
        if textarea and textarea.get_text().strip():
            return textarea.get_text().strip("\n").replace("\r\n", "\n")

        raise ParseError(location, "No <pre> or <textarea> chart content found")


def _block_text(element: Tag) -> str:
    """Return the text of a ``<pre>`` block with ``<br>`` tags as newlines."""
    parts: list[str] = []
    for child in element.descendants:
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString):
            parts.append(str(child))
        elif isinstance(child, Tag) and child.name == "br":
            parts.append("\n")
    return "".join(parts)
