"""
Pytest configuration and shared fixtures.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Tuple

import httpx
import pytest

from wiki_walk.config import WalkConfig
from wiki_walk.models import LinkPage

# Configure logging for tests
logging.basicConfig(level=logging.INFO)

API_URL = "https://test.wikipedia.invalid/w/api.php"


class FakeLinkFetcher:
    """
    Stand-in for LinkPageFetcher backed by an in-memory link graph.

    `pages` maps a title to the list of link pages the API would return for it;
    page i carries continuation token str(i + 1) except the last one. Titles
    absent from `pages` are reported as missing.
    """

    def __init__(self, pages: Dict[str, List[List[str]]]):
        self.pages = pages
        self.calls: List[Tuple[str, Optional[str]]] = []

    async def fetch(self, title: str, continuation: Optional[str] = None) -> LinkPage:
        self.calls.append((title, continuation))
        if title not in self.pages:
            return LinkPage(page_exists=False)
        batches = self.pages[title]
        index = 0 if continuation is None else int(continuation)
        if not batches:
            return LinkPage(page_exists=True)
        next_continuation = str(index + 1) if index + 1 < len(batches) else None
        return LinkPage(page_exists=True, links=batches[index], next_continuation=next_continuation)

    @property
    def calls_per_title(self) -> Counter:
        return Counter(title for title, _ in self.calls)


class FirstChoiceRandom:
    """random.Random stand-in that always picks index 0 and records the sizes it saw."""

    def __init__(self):
        self.ranges: List[int] = []

    def randrange(self, stop: int) -> int:
        self.ranges.append(stop)
        return 0

    def choice(self, seq):
        self.ranges.append(len(seq))
        return seq[0]


def links_response(page_id: str, title: str, links: List[str], plcontinue: Optional[str] = None) -> dict:
    """Build a MediaWiki `prop=links` JSON body (formatversion 1)."""
    page = {"pageid": int(page_id), "ns": 0, "title": title}
    if links:
        page["links"] = [{"ns": 0, "title": link} for link in links]
    body = {"batchcomplete": "", "query": {"pages": {page_id: page}}}
    if plcontinue is not None:
        body = {"continue": {"plcontinue": plcontinue, "continue": "||"}, "query": body["query"]}
    return body


def missing_response(title: str) -> dict:
    return {"batchcomplete": "", "query": {"pages": {"-1": {"ns": 0, "title": title, "missing": ""}}}}


def random_response(titles: List[str]) -> dict:
    return {
        "batchcomplete": "",
        "continue": {"rncontinue": "0.1|0.2|0|0", "continue": "-||"},
        "query": {"random": [{"id": 1000 + i, "ns": 0, "title": t} for i, t in enumerate(titles)]},
    }


@pytest.fixture
def walk_config() -> WalkConfig:
    """Config pointing at a host that is never contacted (all transports are mocked)."""
    return WalkConfig(api_url_override=API_URL, timeout=1.0)


@pytest.fixture
def make_fetcher():
    """Factory for FakeLinkFetcher instances."""
    return FakeLinkFetcher


@pytest.fixture
def first_choice() -> FirstChoiceRandom:
    return FirstChoiceRandom()


@pytest.fixture
def links_json():
    return links_response


@pytest.fixture
def missing_json():
    return missing_response


@pytest.fixture
def random_json():
    return random_response


@pytest.fixture
def mock_client():
    """
    Factory returning (client, requests): an httpx.AsyncClient answered by
    `handler` and the list of requests it has sent.
    """
    def factory(handler) -> Tuple[httpx.AsyncClient, List[httpx.Request]]:
        requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(record)), requests

    return factory
