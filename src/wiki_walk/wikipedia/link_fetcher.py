import logging
from typing import Any, Dict, Optional

from wiki_walk.exceptions import WikiServiceUnavailableException
from wiki_walk.models import LinkPage
from wiki_walk.wikipedia.api import MediaWikiApi


class LinkPageFetcher:
    """
    Fetches one page of outbound article links for a title.

    Each call is exactly one API request. Callers page through an article by
    passing back the returned `next_continuation` until it is None.
    """

    def __init__(self, api: MediaWikiApi):
        self.api = api
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def _page_exists(page_id: str, page: Dict[str, Any]) -> bool:
        # Missing titles come back under a negative id ("-1", "-2", ...)
        if int(page_id) < 0:
            return False
        return "missing" not in page and "invalid" not in page

    async def fetch(self, title: str, continuation: Optional[str] = None) -> LinkPage:
        """
        Fetch the links of `title` restricted to the article namespace.

        Args:
            title: Article title, sent verbatim.
            continuation: plcontinue token from a previous call for the same title.
        """
        if not title:
            raise ValueError("Article title must be non-empty")

        params = {
            "prop": "links",
            "titles": title,
            "plnamespace": "0",
            "pllimit": "max",
        }
        if continuation is not None:
            params["plcontinue"] = continuation

        data = await self.api.query(params)
        pages = data.get("query", {}).get("pages")
        if not pages:
            raise WikiServiceUnavailableException(f"Unexpected API response format for links of '{title}'")

        # "|" separates titles, so "A|B" comes back as two pages and names no single article
        if len(pages) != 1:
            self.logger.debug(f"'{title}' resolved to {len(pages)} pages, not one article")
            return LinkPage(page_exists=False)

        page_id, page = next(iter(pages.items()))
        if not self._page_exists(page_id, page):
            self.logger.debug(f"Page '{title}' does not exist")
            return LinkPage(page_exists=False)

        links = [link["title"] for link in page.get("links", [])]
        next_continuation = data.get("continue", {}).get("plcontinue")
        self.logger.debug(
            f"Fetched {len(links)} links for '{title}' (more pages: {next_continuation is not None})"
        )
        return LinkPage(page_exists=True, links=links, next_continuation=next_continuation)
