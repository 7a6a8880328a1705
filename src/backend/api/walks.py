from fastapi import APIRouter, Depends
from typing import Annotated
import logging

from backend.models.api_models import (
    CreateWalkRequest,
    WalkResponse,
    RandomArticleResponse,
)
from backend.dependencies import get_walk_service
from wiki_walk.walk import WalkService

router = APIRouter(prefix="/api/walks", tags=["walks"])
logger = logging.getLogger(__name__)

WalkServiceDep = Annotated[WalkService, Depends(get_walk_service)]

@router.post("", response_model=WalkResponse)
async def create_walk(request: CreateWalkRequest, service: WalkServiceDep) -> WalkResponse:
    """
    Walk `degree` hops from the start article.

    The response carries the reachable link set of the final article, from
    which a UI picks its destination.
    """
    logger.info(f"Walking {request.degree} hop(s) from '{request.start_title}'")
    result = await service.walk(request.start_title, request.degree)
    return WalkResponse.from_result(result)

@router.get("/random-article", response_model=RandomArticleResponse)
async def get_random_article(service: WalkServiceDep) -> RandomArticleResponse:
    """Get one random article title."""
    return RandomArticleResponse(title=await service.get_random_article())
