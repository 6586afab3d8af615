from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from . import selectors
from .models import SearchResult, StoryPart

BASE_URL = "https://www.wattpad.com"
STAT_FIELDS = ("reads", "votes", "parts")


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def absolute_link(href: Optional[str], base_url: str = BASE_URL) -> str:
    if not href:
        return ""
    return urljoin(base_url, href.strip())


def extract_chapter_text(html: str) -> str:
    soup = make_soup(html)
    paragraphs = [node.get_text().strip() for node in selectors.select_chapter_paragraphs(soup)]
    return " ".join(paragraphs)


def parse_story_parts(html: str, base_url: str = BASE_URL) -> list[StoryPart]:
    soup = make_soup(html)
    parts: list[StoryPart] = []
    for item in selectors.select_story_part_items(soup):
        title = selectors.select_part_title(item)
        link = absolute_link(selectors.select_part_href(item), base_url)
        parts.append(StoryPart(title=title, link=link))
    return parts


def parse_search_results(html: str, base_url: str = BASE_URL) -> list[SearchResult]:
    soup = make_soup(html)
    results: list[SearchResult] = []
    for card in selectors.select_story_cards(soup):
        stats = dict.fromkeys(STAT_FIELDS, "")
        for label, value in selectors.select_card_stats(card):
            if label in stats:
                stats[label] = value

        results.append(
            SearchResult(
                title=selectors.select_card_title(card),
                author=selectors.select_card_author(card),
                link=absolute_link(selectors.select_card_href(card), base_url),
                thumbnail=selectors.select_card_thumbnail(card),
                description=selectors.select_card_description(card),
                **stats,
            )
        )
    return results
