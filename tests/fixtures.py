from __future__ import annotations

from typing import Union

import requests


def make_response(url: str, body: str = "", status_code: int = 200) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    response.url = url
    response.encoding = "utf-8"
    response._content = body.encode("utf-8")
    return response


class FakeSession:
    """Serves canned HTML per URL and records every requested URL."""

    def __init__(self, pages: dict[str, Union[str, int, Exception]]) -> None:
        self.pages = pages
        self.requested: list[str] = []
        self.closed = False

    def get(self, url: str, **kwargs) -> requests.Response:
        self.requested.append(url)
        page = self.pages.get(url, 404)
        if isinstance(page, Exception):
            raise page
        if isinstance(page, int):
            return make_response(url, "", status_code=page)
        return make_response(url, page)

    def close(self) -> None:
        self.closed = True


def chapter_html(*paragraphs: str) -> str:
    body = "".join(
        f'<p data-p-id="p{index}">{text}</p>' for index, text in enumerate(paragraphs)
    )
    return f"<html><body><div class='panel'>{body}</div></body></html>"

STORY_PAGE = """
<html><body>
<div class="table-of-contents">
  <div class="story-parts">
    <ul>
      <li><a href="/123-prologue"><div class="part-title"> Prologue </div></a></li>
      <li><a href="/124-chapter-one"><div class="part-title">Chapter One</div></a></li>
      <li><div class="part-title">Draft without link</div></li>
      <li><a href="https://www.wattpad.com/125-chapter-two"></a></li>
    </ul>
  </div>
</div>
<ul class="sidebar"><li><a href="/not-a-part">Other</a></li></ul>
</body></html>
"""

SEARCH_PAGE = """
<html><body>
<a class="story-card" href="/story/1-first-story">
  <div class="cover"><img src="https://img.wattpad.com/cover/1.jpg"></div>
  <div class="title">First Story</div>
  <div class="username">alice</div>
  <div class="new-story-stats">
    <div class="stats-item"><span class="stats-label__text">Reads</span><span class="stats-value">1.2M</span></div>
    <div class="stats-item"><span class="stats-label__text">Votes</span><span class="stats-value">45.1K</span></div>
    <div class="stats-item"><span class="stats-label__text">Parts</span><span class="stats-value">30</span></div>
  </div>
  <div class="description"> A tale of two cities. </div>
</a>
<a class="story-card" href="/story/2-second-story">
  <div class="title">Second Story</div>
  <div class="username">bob</div>
  <div class="new-story-stats">
    <div class="stats-item"><span class="stats-label__text">READS</span><span class="stats-value">980</span></div>
    <div class="stats-item"><span class="stats-label__text">Parts</span><span class="stats-value">3</span></div>
    <div class="stats-item"><span class="stats-label__text">Mature</span><span class="stats-value">yes</span></div>
  </div>
  <div class="description">No votes yet.</div>
</a>
</body></html>
"""
