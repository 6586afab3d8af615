from __future__ import annotations

from typing import Optional


class ScrapeError(RuntimeError):
    """Raised when a page could not be fetched."""

    def __init__(self, message: str, *, url: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
