"""
Challenge builder

Creates start/target pairs for the navigation game and plays them:

- degree challenges walk N hops from the start article and draw the target from
  the reachable link set, so the target is at most N + 1 links away;
- random challenges take any random article as the target;
- a move follows one link of the current article and reports whether the
  target was reached.

Challenges also return the start article's own links, the player's first choices.
"""

import logging
import random
from typing import List, Optional

from wiki_walk.exceptions import DeadEndException, InvalidMoveException
from wiki_walk.models import Challenge, ChallengeMode, MoveResult
from wiki_walk.walk.service import WalkService


class ChallengeBuilder:
    """Builds and plays challenges on top of a WalkService."""

    def __init__(self, walk_service: WalkService, rng: Optional[random.Random] = None):
        self.service = walk_service
        self.rng = rng or random.Random()
        self.logger = logging.getLogger(__name__)

    async def degree_challenge(self, start_title: str, degree: int) -> Challenge:
        """Pick a target from the reachable set of a `degree`-hop walk."""
        if degree < 1:
            raise ValueError("Degree must be at least 1")

        # One hop from the start validates it and yields the player's first choices
        start_links = await self.service.start_walk(start_title, 1)
        if degree == 1:
            final_title, reachable = start_title, start_links
        else:
            result = await self.service.walk(start_title, degree)
            final_title, reachable = result.final_title, result.links
        if not reachable:
            raise DeadEndException(final_title, degree)

        target_title = self.rng.choice(reachable)
        self.logger.info(f"Degree {degree} challenge: '{start_title}' -> '{target_title}'")
        return Challenge(
            start_title=start_title,
            target_title=target_title,
            mode=ChallengeMode.DEGREE,
            degree=degree,
            start_links=start_links,
        )

    async def random_challenge(self, start_title: str) -> Challenge:
        """Pick any random article as the target."""
        start_links = await self.service.start_walk(start_title, 1)
        target_title = await self.service.get_random_article()
        self.logger.info(f"Random challenge: '{start_title}' -> '{target_title}'")
        return Challenge(
            start_title=start_title,
            target_title=target_title,
            mode=ChallengeMode.RANDOM,
            start_links=start_links,
        )

    async def move(self, current_links: List[str], next_title: str, target_title: str) -> MoveResult:
        """
        Follow `next_title` from the current article.

        The title must be one of `current_links` (exact match). The new
        article's links are loaded even when it is the target.
        """
        if next_title not in current_links:
            raise InvalidMoveException(next_title)

        links = await self.service.start_walk(next_title, 1)
        reached_target = next_title == target_title
        if reached_target:
            self.logger.info(f"Target '{target_title}' reached")
        else:
            self.logger.debug(f"Moved to '{next_title}' ({len(links)} links)")
        return MoveResult(title=next_title, links=links, reached_target=reached_target)
