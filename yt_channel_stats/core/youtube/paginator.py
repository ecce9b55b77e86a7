"""
Cursor Paginator
Follows nextPageToken cursors across a listing endpoint.
"""

import logging
from typing import Callable, Iterator, List, Optional, TypeVar

from .responses import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

PageFetcher = Callable[[Optional[str]], Page[T]]


def iterate_pages(fetch_page: PageFetcher, max_pages: Optional[int] = None) -> Iterator[Page[T]]:
    """
    Yield pages lazily, starting with no cursor.

    The loop ends when a page comes back without a continuation cursor. The
    cursor is handed back verbatim; it is owned by the API and never inspected.
    `max_pages` is a safety bound against an API that never stops returning
    cursors; None means unbounded. Errors raised by `fetch_page` propagate.
    """
    page_token: Optional[str] = None
    fetched = 0

    while True:
        if max_pages is not None and fetched >= max_pages:
            logger.warning(f"Stopped paginating after {fetched} pages; the API kept returning cursors")
            return

        page = fetch_page(page_token)
        fetched += 1
        yield page

        page_token = page.next_page_token
        if not page_token:
            return


def collect_items(fetch_page: PageFetcher, max_pages: Optional[int] = None) -> List[T]:
    """Materialize every item of every page, in page order then in-page order."""
    items: List[T] = []
    for page in iterate_pages(fetch_page, max_pages=max_pages):
        items.extend(page.items)
    return items
