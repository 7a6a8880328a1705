"""
wiki_walk - Core Library

Random walks over Wikipedia's article-link graph, used to pick destinations a
known number of hops away from a start article.
"""

from .exceptions import (
    WikiWalkException,
    PageNotFoundException,
    DeadEndException,
    WikiServiceUnavailableException,
    InvalidMoveException,
)
from .models import WalkRequest, WalkResult, LinkPage, Challenge, ChallengeMode, MoveResult
from .walk import WalkOrchestrator, WalkService

__all__ = [
    'WikiWalkException',
    'PageNotFoundException',
    'DeadEndException',
    'WikiServiceUnavailableException',
    'InvalidMoveException',
    'WalkRequest',
    'WalkResult',
    'LinkPage',
    'Challenge',
    'ChallengeMode',
    'MoveResult',
    'WalkOrchestrator',
    'WalkService',
]
