from typing import List, Optional
from pydantic import BaseModel, Field

from wiki_walk.models import ChallengeMode, WalkResult

# Walk Models
class CreateWalkRequest(BaseModel):
    """Request to walk a number of hops from a start article."""
    start_title: str = Field(..., min_length=1, description="Start article title, used verbatim")
    degree: int = Field(..., ge=1, description="Number of hops to perform")

class WalkResponse(BaseModel):
    """Completed walk with its reachable link set."""
    start_title: str
    degree: int
    final_title: str
    path: List[str]
    links: List[str]
    link_count: int

    @classmethod
    def from_result(cls, result: WalkResult) -> "WalkResponse":
        return cls(
            start_title=result.start_title,
            degree=result.total_degree,
            final_title=result.final_title,
            path=result.path,
            links=result.links,
            link_count=result.link_count,
        )

class RandomArticleResponse(BaseModel):
    """A single random article."""
    title: str

# Challenge Models
class CreateChallengeRequest(BaseModel):
    """Request a start/target pair; a missing degree means a fully random target."""
    start_title: str = Field(..., min_length=1, description="Start article title")
    degree: Optional[int] = Field(None, ge=1, description="Hops from start to the target's neighbourhood")

class ChallengeResponse(BaseModel):
    """Response when creating a challenge."""
    start_title: str
    target_title: str
    mode: ChallengeMode
    degree: Optional[int] = None
    start_links: List[str]

# Move Models
class MoveRequest(BaseModel):
    """A player's move: the current article's links and the chosen one."""
    current_links: List[str] = Field(..., description="Links of the article the player is on")
    next_title: str = Field(..., min_length=1, description="Title the player moves to; must be in current_links")
    target_title: str = Field(..., min_length=1, description="Challenge target title")

class MoveResponse(BaseModel):
    """Response after a move."""
    title: str
    links: List[str]
    reached_target: bool

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
    title: Optional[str] = None
