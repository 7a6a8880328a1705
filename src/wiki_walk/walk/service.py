import logging
import random
from typing import List, Optional

import httpx

from wiki_walk.config import WalkConfig
from wiki_walk.models import WalkRequest, WalkResult
from wiki_walk.walk.orchestrator import WalkOrchestrator
from wiki_walk.wikipedia import LinkPageFetcher, MediaWikiApi, RandomArticlePicker


class WalkService:
    """
    Entry point for callers: random walks and random articles.

    Without a client every request opens its own HTTP connection. Used as an
    async context manager, the service opens one httpx.AsyncClient and closes
    it on exit; a client passed in by the caller is never closed here.
    """

    def __init__(
            self,
            config: Optional[WalkConfig] = None,
            rng: Optional[random.Random] = None,
            client: Optional[httpx.AsyncClient] = None
        ):
        self.config = config or WalkConfig()
        self.rng = rng
        self.logger = logging.getLogger(__name__)
        self._owned_client: Optional[httpx.AsyncClient] = None
        self._wire(client)

    def _wire(self, client: Optional[httpx.AsyncClient]) -> None:
        self.api = MediaWikiApi(self.config, client=client)
        self.fetcher = LinkPageFetcher(self.api)
        self.picker = RandomArticlePicker(self.api)
        self.orchestrator = WalkOrchestrator(self.fetcher, rng=self.rng)

    async def __aenter__(self) -> "WalkService":
        if self.api.client is None:
            self._owned_client = httpx.AsyncClient(timeout=self.config.timeout)
            self._wire(self._owned_client)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owned_client is not None:
            await self._owned_client.aclose()
            self._owned_client = None
            self._wire(None)

    async def walk(self, title: str, degree: int) -> WalkResult:
        """Walk `degree` hops from `title` and return the full result."""
        request = WalkRequest(start_title=title, total_degree=degree)
        self.logger.debug(f"Starting walk from '{title}' ({degree} hop(s))")
        return await self.orchestrator.run(request)

    async def start_walk(self, title: str, degree: int) -> List[str]:
        """Walk `degree` hops from `title` and return the reachable link set."""
        result = await self.walk(title, degree)
        return result.links

    async def get_random_article(self) -> str:
        return await self.picker.pick_random()
