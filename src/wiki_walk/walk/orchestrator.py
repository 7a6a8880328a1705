"""
Random walk over the article-link graph.

A walk of degree N assembles the full link set of N articles in sequence: the
seed, then N - 1 articles each picked uniformly at random from the previous
article's links. The last article's link set is the walk's result.
"""

import logging
import random
from typing import List, Optional

from wiki_walk.exceptions import DeadEndException, PageNotFoundException
from wiki_walk.models import WalkRequest, WalkResult
from wiki_walk.wikipedia.link_fetcher import LinkPageFetcher


class WalkOrchestrator:
    """
    Drives one traversal at a time through an explicit fetch/advance loop.

    The orchestrator itself holds no per-walk state, so a single instance can
    serve concurrent walks; every run() owns its own accumulator.
    """

    def __init__(self, fetcher: LinkPageFetcher, rng: Optional[random.Random] = None):
        self.fetcher = fetcher
        self.rng = rng or random.Random()
        self.logger = logging.getLogger(__name__)

    async def collect_links(self, title: str) -> List[str]:
        """
        Page through every outbound link of `title`.

        Raises PageNotFoundException as soon as the API reports the page missing.
        """
        accumulated: List[str] = []
        continuation: Optional[str] = None
        while True:
            page = await self.fetcher.fetch(title, continuation)
            if not page.page_exists:
                raise PageNotFoundException(title)
            accumulated.extend(page.links)
            continuation = page.next_continuation
            if continuation is None:
                return accumulated

    def _choose_next(self, links: List[str]) -> str:
        return links[self.rng.randrange(len(links))]

    async def run(self, request: WalkRequest) -> WalkResult:
        current_title = request.start_title
        path = [current_title]
        hop = 1

        while True:
            links = await self.collect_links(current_title)
            if hop == request.total_degree:
                break
            if not links:
                self.logger.warning(f"Walk from '{request.start_title}' hit a dead end at '{current_title}'")
                raise DeadEndException(current_title, hop)
            current_title = self._choose_next(links)
            hop += 1
            path.append(current_title)
            self.logger.debug(f"Hop {hop}/{request.total_degree}: '{current_title}'")

        self.logger.info(
            f"Walk '{request.start_title}' -> '{current_title}' finished after "
            f"{request.total_degree} hop(s) with {len(links)} reachable links"
        )
        return WalkResult(
            start_title=request.start_title,
            total_degree=request.total_degree,
            final_title=current_title,
            path=path,
            links=links,
        )
