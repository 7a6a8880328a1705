import os
from typing import Optional
from pydantic import BaseModel, Field

DEFAULT_USER_AGENT = "wiki-walk/0.1 (random walks over the Wikipedia link graph)"


class WalkConfig(BaseModel):
    """Settings for talking to the MediaWiki action API."""

    language: str = Field("en", min_length=1, description="Wikipedia language edition")
    api_url_override: Optional[str] = Field(None, description="Full api.php URL; derived from language when unset")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header sent with every request")
    timeout: float = Field(10.0, gt=0, description="Per-request timeout in seconds")

    @property
    def api_url(self) -> str:
        if self.api_url_override:
            return self.api_url_override
        return f"https://{self.language}.wikipedia.org/w/api.php"

    @classmethod
    def from_env(cls) -> "WalkConfig":
        """Create config from environment variables."""
        return cls(
            language=os.getenv("WIKI_WALK_LANGUAGE", "en"),
            api_url_override=os.getenv("WIKI_WALK_API_URL") or None,
            user_agent=os.getenv("WIKI_WALK_USER_AGENT", DEFAULT_USER_AGENT),
            timeout=float(os.getenv("WIKI_WALK_TIMEOUT", "10.0")),
        )
