from .client import StoryClient
from .errors import ScrapeError
from .models import PageContent, ReadResult, SearchResult, StopReason, StoryPart
from .pacing import FixedDelay, NoDelay
from .cli import parse_args, validate_args

__all__ = [
    "StoryClient",
    "ScrapeError",
    "PageContent",
    "ReadResult",
    "SearchResult",
    "StopReason",
    "StoryPart",
    "FixedDelay",
    "NoDelay",
    "parse_args",
    "validate_args",
]
