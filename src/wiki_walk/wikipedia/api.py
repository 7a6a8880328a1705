import logging
from typing import Any, Dict, Optional

import httpx

from wiki_walk.config import WalkConfig
from wiki_walk.exceptions import WikiServiceUnavailableException


class MediaWikiApi:
    """
    Thin async wrapper over the MediaWiki action API.

    When constructed with an httpx.AsyncClient the client is reused for every
    request (and owned by the caller); otherwise a short-lived client is opened
    per request.
    """

    def __init__(self, config: Optional[WalkConfig] = None, client: Optional[httpx.AsyncClient] = None):
        self.config = config or WalkConfig()
        self.client = client
        self.logger = logging.getLogger(__name__)

    @property
    def headers(self) -> Dict[str, str]:
        return {"User-Agent": self.config.user_agent}

    async def _send(self, client: httpx.AsyncClient, params: Dict[str, str]) -> httpx.Response:
        response = await client.get(self.config.api_url, params=params, headers=self.headers)
        response.raise_for_status()
        return response

    async def query(self, params: Dict[str, str]) -> Dict[str, Any]:
        """
        Issue one `action=query` request and return the decoded JSON body.

        httpx errors are logged and re-raised unchanged. An API-level error
        payload raises WikiServiceUnavailableException.
        """
        params = {"action": "query", "format": "json", **params}
        try:
            if self.client is not None:
                response = await self._send(self.client, params)
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                    response = await self._send(client, params)
        except httpx.HTTPError as e:
            self.logger.error(f"Wikipedia API request failed: {e}")
            raise

        data = response.json()
        if "error" in data:
            info = data["error"].get("info", "unknown error")
            raise WikiServiceUnavailableException(f"Wikipedia API error: {info}")
        return data
