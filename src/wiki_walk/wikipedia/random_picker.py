import logging

from wiki_walk.exceptions import WikiServiceUnavailableException
from wiki_walk.wikipedia.api import MediaWikiApi


class RandomArticlePicker:
    """Picks one uniformly random main-namespace article, independent of any walk."""

    def __init__(self, api: MediaWikiApi):
        self.api = api
        self.logger = logging.getLogger(__name__)

    async def pick_random(self) -> str:
        """Get a random article title. (1 API call)"""
        params = {"list": "random", "rnnamespace": "0", "rnlimit": "1"}
        data = await self.api.query(params)
        random_pages = data.get("query", {}).get("random")
        if not random_pages:
            raise WikiServiceUnavailableException("Unexpected API response format for random article")
        title = random_pages[0]["title"]
        self.logger.debug(f"Random article: '{title}'")
        return title
