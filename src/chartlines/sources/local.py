"""Source for charts stored in local text files, or piped in on stdin.

Any location that is not an http(s) URL is treated as a file path; ``-``
means standard input.  Files are decoded as UTF-8 with any leading byte-order
mark dropped.  ``\\r\\n`` line endings become ``\\n``; a lone ``\\r`` is left
in place and ends up in the line's content.
"""

import logging
import sys
from pathlib import Path

from ..exceptions import FetchError
from .base import ChartSource

logger = logging.getLogger(__name__)

STDIN = "-"
BOM = "\ufeff"


class FileSource(ChartSource):
    """Source for local chart files and stdin."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        if location == STDIN:
            return True
        return "://" not in location

    def fetch(self, location: str) -> str:
        try:
            if location == STDIN:
                text = sys.stdin.read()
            else:
                # Bytes, so no universal-newline translation happens here
                text = Path(location).read_bytes().decode("utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise FetchError(location, 0) from exc
        logger.debug("Read %d characters from %s", len(text), location)
        return text

    def extract(self, payload: str, location: str) -> str:
        # stdin is decoded by the interpreter and may still carry a BOM
        if payload.startswith(BOM):
            payload = payload[1:]
        return payload.replace("\r\n", "\n")
