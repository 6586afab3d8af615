"""CSS selectors for Wattpad markup, wrapped in named query functions.

Only this module knows the selector strings; the parsers call the functions
below so a markup change on the site is fixed in one place.
"""
from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, Tag

CHAPTER_PARAGRAPHS = "p[data-p-id]"
STORY_PART_ITEMS = ".table-of-contents .story-parts ul li"
PART_TITLE = ".part-title"
PART_LINK = "a[href]"
STORY_CARDS = ".story-card"
CARD_TITLE = ".title"
CARD_DESCRIPTION = ".description"
CARD_THUMBNAIL = ".cover img"
CARD_STAT_ITEMS = ".new-story-stats .stats-item"
STAT_LABEL = ".stats-label__text"
STAT_VALUE = ".stats-value"
CARD_AUTHOR = ".username"


def select_chapter_paragraphs(soup: BeautifulSoup) -> list[Tag]:
    return soup.select(CHAPTER_PARAGRAPHS)


def select_story_part_items(soup: BeautifulSoup) -> list[Tag]:
    return soup.select(STORY_PART_ITEMS)


def select_part_title(item: Tag) -> str:
    return joined_text(item, PART_TITLE)


def select_part_href(item: Tag) -> Optional[str]:
    link = item.select_one(PART_LINK)
    return link["href"] if link else None


def select_story_cards(soup: BeautifulSoup) -> list[Tag]:
    return soup.select(STORY_CARDS)


def select_card_title(card: Tag) -> str:
    return joined_text(card, CARD_TITLE)


def select_card_description(card: Tag) -> str:
    return joined_text(card, CARD_DESCRIPTION)


def select_card_author(card: Tag) -> str:
    return joined_text(card, CARD_AUTHOR)


def select_card_href(card: Tag) -> Optional[str]:
    return card.get("href")


def select_card_thumbnail(card: Tag) -> str:
    image = card.select_one(CARD_THUMBNAIL)
    return image.get("src", "") if image else ""


def select_card_stats(card: Tag) -> list[tuple[str, str]]:
    """Return ``(label, value)`` pairs with the label lower-cased."""
    return [
        (joined_text(item, STAT_LABEL).lower(), joined_text(item, STAT_VALUE))
        for item in card.select(CARD_STAT_ITEMS)
    ]


def joined_text(node: Tag, selector: str) -> str:
    # Text of every match is concatenated.
    return "".join(match.get_text() for match in node.select(selector)).strip()
