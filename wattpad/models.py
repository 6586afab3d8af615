from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .errors import ScrapeError


@dataclass(frozen=True)
class PageContent:
    page_number: int
    url: str
    content: str


@dataclass(frozen=True)
class StoryPart:
    title: str
    link: str


@dataclass(frozen=True)
class SearchResult:
    title: str = ""
    author: str = ""
    link: str = ""
    thumbnail: str = ""
    reads: str = ""
    votes: str = ""
    parts: str = ""
    description: str = ""


class StopReason(str, Enum):
    EMPTY_PAGE = "empty_page"
    PAGE_LIMIT = "page_limit"
    ERROR = "error"


@dataclass(frozen=True)
class ReadResult:
    """Pages collected by a paginated read and why the loop stopped.

    Iterating, indexing and ``len()`` operate on the collected pages, so the
    result can be used wherever a sequence of pages is expected.
    """

    pages: tuple[PageContent, ...]
    stop_reason: StopReason
    error: Optional["ScrapeError"] = None

    def __iter__(self) -> Iterator[PageContent]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[PageContent, tuple[PageContent, ...]]:
        return self.pages[index]

    @property
    def ok(self) -> bool:
        return self.stop_reason is not StopReason.ERROR

    @property
    def content(self) -> str:
        return "\n\n".join(page.content for page in self.pages)
