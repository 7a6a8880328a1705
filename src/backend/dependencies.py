from fastapi import Request
from wiki_walk.challenge import ChallengeBuilder
from wiki_walk.walk import WalkService

async def get_walk_service(request: Request) -> WalkService:
    """Dependency provider to get the shared WalkService instance."""
    return request.app.state.walk_service

async def get_challenge_builder(request: Request) -> ChallengeBuilder:
    """Dependency provider to get the shared ChallengeBuilder instance."""
    return request.app.state.challenge_builder
