from fastapi import APIRouter, Depends
from typing import Annotated
import logging

from backend.models.api_models import CreateChallengeRequest, ChallengeResponse, MoveRequest, MoveResponse
from backend.dependencies import get_challenge_builder
from wiki_walk.challenge import ChallengeBuilder

router = APIRouter(prefix="/api/challenges", tags=["challenges"])
logger = logging.getLogger(__name__)

ChallengeBuilderDep = Annotated[ChallengeBuilder, Depends(get_challenge_builder)]

@router.post("", response_model=ChallengeResponse)
async def create_challenge(request: CreateChallengeRequest, builder: ChallengeBuilderDep) -> ChallengeResponse:
    """Create a start/target challenge, degree-based or fully random."""
    if request.degree is None:
        challenge = await builder.random_challenge(request.start_title)
    else:
        challenge = await builder.degree_challenge(request.start_title, request.degree)
    return ChallengeResponse(**challenge.model_dump())

@router.post("/moves", response_model=MoveResponse)
async def make_move(request: MoveRequest, builder: ChallengeBuilderDep) -> MoveResponse:
    """
    Follow one link of the current article.

    Returns the new article's links and whether it is the challenge target.
    """
    result = await builder.move(request.current_links, request.next_title, request.target_title)
    return MoveResponse(**result.model_dump())
