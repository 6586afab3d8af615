from __future__ import annotations

import pytest

from tests.fixtures import FakeSession
from wattpad import NoDelay, StoryClient


@pytest.fixture
def make_client():
    def factory(pages: dict, **kwargs) -> tuple[StoryClient, FakeSession]:
        session = FakeSession(pages)
        kwargs.setdefault("pacing", NoDelay())
        kwargs.setdefault("silent", True)
        return StoryClient(scraper=session, **kwargs), session

    return factory
