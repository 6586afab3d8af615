from __future__ import annotations

from typing import Optional
from urllib.parse import quote

import requests

from .errors import ScrapeError
from .http_utils import DEFAULT_TIMEOUT, create_scraper, fetch_html
from .models import PageContent, ReadResult, SearchResult, StopReason, StoryPart
from .pacing import FixedDelay, PacingPolicy
from .parsing import BASE_URL, extract_chapter_text, parse_search_results, parse_story_parts
from .ui import ConsoleUI

DEFAULT_MAX_PAGES = 99
DEFAULT_PAGE_DELAY = 1.0

# Left unescaped in search queries along with letters, digits and "_.-~".
QUERY_SAFE_CHARS = "!~*'()"


class StoryClient:
    """Scrapes chapter text, chapter listings and search results from Wattpad.

    The client keeps no state between calls apart from the HTTP session,
    which is created on first use unless one is passed in.
    """

    def __init__(
        self,
        *,
        scraper: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = BASE_URL,
        max_pages: int = DEFAULT_MAX_PAGES,
        pacing: Optional[PacingPolicy] = None,
        ui: Optional[ConsoleUI] = None,
        silent: bool = False,
    ) -> None:
        self._scraper = scraper
        self._owns_scraper = scraper is None
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self.max_pages = max_pages
        self.pacing = pacing if pacing is not None else FixedDelay(DEFAULT_PAGE_DELAY)
        self.ui = ui
        self.silent = silent

    @property
    def scraper(self) -> requests.Session:
        if self._scraper is None:
            self._scraper = create_scraper()
        return self._scraper

    def close(self) -> None:
        if self._owns_scraper and self._scraper is not None:
            self._scraper.close()
            self._scraper = None

    def __enter__(self) -> "StoryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _fetch(self, url: str, purpose: str) -> str:
        return fetch_html(self.scraper, url, timeout=self.timeout, purpose=purpose)

    def _warn(self, message: str) -> None:
        if self.ui:
            self.ui.log_event(message, level="warning")
        elif not self.silent:
            print(f"Warning: {message}", flush=True)

    def read_page(self, url: str) -> str:
        """Return the paragraphs of a single chapter page joined by spaces."""
        html = self._fetch(url, "Chapter page request")
        return extract_chapter_text(html)

    def read(self, initial_url: str) -> ReadResult:
        """Read every page of a chapter starting at ``initial_url``.

        Pages ``{initial_url}/page/1``, ``/page/2``... are fetched one after
        another until a page has no paragraphs, a fetch fails or
        ``max_pages`` is reached. A failed fetch ends the loop but is not
        raised; it is recorded on the returned :class:`ReadResult`.
        """
        chapter_url = initial_url.rstrip("/")
        pages: list[PageContent] = []

        for page_number in range(1, self.max_pages + 1):
            page_url = f"{chapter_url}/page/{page_number}"
            if self.ui:
                self.ui.update_status(f"Reading page {page_number}...")
            try:
                content = self.read_page(page_url)
            except ScrapeError as exc:
                self._warn(f"Stopped reading at page {page_number}: {exc}")
                return self._finish(pages, StopReason.ERROR, exc)

            if not content:
                return self._finish(pages, StopReason.EMPTY_PAGE)

            pages.append(PageContent(page_number=page_number, url=page_url, content=content))
            if page_number < self.max_pages:
                self.pacing.wait()

        return self._finish(pages, StopReason.PAGE_LIMIT)

    def _finish(
        self,
        pages: list[PageContent],
        reason: StopReason,
        error: Optional[ScrapeError] = None,
    ) -> ReadResult:
        if self.ui:
            self.ui.update_status(None)
        return ReadResult(pages=tuple(pages), stop_reason=reason, error=error)

    def get_parts(self, url: str) -> list[StoryPart]:
        html = self._fetch(url, "Story page request")
        return parse_story_parts(html, self.base_url)

    getParts = get_parts

    def search_url(self, query: str) -> str:
        return f"{self.base_url}/search/{quote(query, safe=QUERY_SAFE_CHARS)}"

    def search(self, query: str) -> list[SearchResult]:
        html = self._fetch(self.search_url(query), "Search request")
        return parse_search_results(html, self.base_url)
