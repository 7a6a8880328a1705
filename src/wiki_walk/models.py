from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, Field, model_validator

# --- Fetch Models ---

class LinkPage(BaseModel):
    """One API response worth of outbound links for a single article."""
    page_exists: bool = Field(..., description="False when the API reports the title as missing or invalid.")
    links: List[str] = Field(default_factory=list, description="Linked article titles in API order.")
    next_continuation: Optional[str] = Field(None, description="plcontinue token, None once the link list is exhausted.")

    @model_validator(mode="after")
    def missing_page_has_no_links(self) -> "LinkPage":
        if not self.page_exists and (self.links or self.next_continuation is not None):
            raise ValueError("A missing page cannot carry links or a continuation token.")
        return self

# --- Walk Models ---

class WalkRequest(BaseModel):
    """A request to walk `total_degree` hops starting from `start_title`."""
    start_title: str = Field(..., min_length=1, description="Seed article title, used verbatim.")
    total_degree: int = Field(..., ge=1, description="Number of hops to perform (not a zero-based index).")

class WalkResult(BaseModel):
    """Outcome of a completed walk."""
    start_title: str
    total_degree: int
    final_title: str = Field(..., description="The article reached after the last hop.")
    path: List[str] = Field(..., description="Every article visited, in order, starting with start_title.")
    links: List[str] = Field(..., description="Full link set of final_title; duplicates are preserved.")

    @property
    def link_count(self) -> int:
        return len(self.links)

# --- Challenge Models ---

class ChallengeMode(str, Enum):
    """How the target of a challenge was chosen."""
    DEGREE = "degree"
    RANDOM = "random"

class Challenge(BaseModel):
    """A start/target pair for the navigation game."""
    start_title: str
    target_title: str
    mode: ChallengeMode
    degree: Optional[int] = Field(None, description="Hops used to reach the target's neighbourhood; None for random targets.")
    start_links: List[str] = Field(default_factory=list, description="Links of the start article, i.e. the player's first choices.")

class MoveResult(BaseModel):
    """Outcome of a player following one link."""
    title: str = Field(..., description="The article the player moved to.")
    links: List[str] = Field(default_factory=list, description="Links of the new article, i.e. the next choices.")
    reached_target: bool = Field(..., description="True when the move landed on the challenge target.")
