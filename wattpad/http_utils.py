from __future__ import annotations

from typing import Optional

import cloudscraper
import requests
from cloudscraper.exceptions import CloudflareException

from .errors import ScrapeError

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/126.0.0.0 Safari/537.36"
)

DEFAULT_HEADERS = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

DEFAULT_TIMEOUT = 60.0


def create_scraper() -> cloudscraper.CloudScraper:
    scraper = cloudscraper.create_scraper(
        browser={"browser": "chrome", "platform": "windows", "mobile": False},
    )
    scraper.headers.update(DEFAULT_HEADERS)
    return scraper


def fetch_html(
    scraper: requests.Session,
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    purpose: str = "Page request",
) -> str:
    """GET ``url`` once and return the body text.

    Network errors, timeouts, non-2xx statuses and Cloudflare blocks are
    raised as :class:`ScrapeError` with the original exception chained.
    """
    try:
        response = scraper.get(url, timeout=timeout, allow_redirects=True)
        response.raise_for_status()
    except (requests.RequestException, CloudflareException) as exc:
        status_code: Optional[int] = None
        error_response = getattr(exc, "response", None)
        if error_response is not None:
            status_code = error_response.status_code
        message = str(exc).strip() or exc.__class__.__name__
        raise ScrapeError(
            f"Unable to complete {purpose.lower()} for {url}: {message}",
            url=url,
            status_code=status_code,
        ) from exc
    return response.text
