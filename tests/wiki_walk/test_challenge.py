from unittest.mock import AsyncMock, Mock

import pytest

from wiki_walk.challenge import ChallengeBuilder
from wiki_walk.exceptions import DeadEndException, InvalidMoveException, PageNotFoundException
from wiki_walk.models import ChallengeMode, WalkResult


@pytest.fixture
def mock_service():
    """Mock WalkService for testing."""
    service = Mock()
    service.start_walk = AsyncMock(return_value=["Footloose", "Tremors"])
    service.walk = AsyncMock()
    service.get_random_article = AsyncMock(return_value="Mystic River (film)")
    return service


def walk_result(links, final_title="Dance", degree=2):
    return WalkResult(
        start_title="Kevin Bacon",
        total_degree=degree,
        final_title=final_title,
        path=["Kevin Bacon", final_title],
        links=links,
    )


class TestDegreeChallenge:

    @pytest.mark.asyncio
    async def test_target_is_drawn_from_reachable_set(self, mock_service, first_choice):
        mock_service.walk.return_value = walk_result(["Ballet", "Tango"])
        builder = ChallengeBuilder(mock_service, rng=first_choice)

        challenge = await builder.degree_challenge("Kevin Bacon", 2)

        assert challenge.start_title == "Kevin Bacon"
        assert challenge.target_title == "Ballet"
        assert challenge.mode == ChallengeMode.DEGREE
        assert challenge.degree == 2
        assert challenge.start_links == ["Footloose", "Tremors"]
        mock_service.start_walk.assert_awaited_once_with("Kevin Bacon", 1)
        mock_service.walk.assert_awaited_once_with("Kevin Bacon", 2)
        assert first_choice.ranges == [2]

    @pytest.mark.asyncio
    async def test_degree_one_reuses_start_links(self, mock_service, first_choice):
        builder = ChallengeBuilder(mock_service, rng=first_choice)

        challenge = await builder.degree_challenge("Kevin Bacon", 1)

        assert challenge.target_title == "Footloose"
        assert challenge.start_links == ["Footloose", "Tremors"]
        mock_service.start_walk.assert_awaited_once_with("Kevin Bacon", 1)
        mock_service.walk.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_degree_one_dead_end(self, mock_service):
        mock_service.start_walk.return_value = []
        builder = ChallengeBuilder(mock_service)

        with pytest.raises(DeadEndException) as exc_info:
            await builder.degree_challenge("Lonely stub", 1)

        assert exc_info.value.title == "Lonely stub"

    @pytest.mark.asyncio
    async def test_empty_reachable_set_is_a_dead_end(self, mock_service):
        mock_service.walk.return_value = walk_result([], final_title="Lonely stub")
        builder = ChallengeBuilder(mock_service)

        with pytest.raises(DeadEndException) as exc_info:
            await builder.degree_challenge("Kevin Bacon", 2)

        assert exc_info.value.title == "Lonely stub"

    @pytest.mark.asyncio
    async def test_missing_start_page_propagates(self, mock_service):
        mock_service.start_walk.side_effect = PageNotFoundException("Kevin Bacn")
        builder = ChallengeBuilder(mock_service)

        with pytest.raises(PageNotFoundException):
            await builder.degree_challenge("Kevin Bacn", 2)

        mock_service.walk.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("degree", [0, -1])
    async def test_degree_must_be_positive(self, mock_service, degree):
        builder = ChallengeBuilder(mock_service)

        with pytest.raises(ValueError, match="at least 1"):
            await builder.degree_challenge("Kevin Bacon", degree)

        mock_service.start_walk.assert_not_awaited()


class TestRandomChallenge:

    @pytest.mark.asyncio
    async def test_target_is_a_random_article(self, mock_service):
        builder = ChallengeBuilder(mock_service)

        challenge = await builder.random_challenge("Kevin Bacon")

        assert challenge.target_title == "Mystic River (film)"
        assert challenge.mode == ChallengeMode.RANDOM
        assert challenge.degree is None
        assert challenge.start_links == ["Footloose", "Tremors"]
        mock_service.walk.assert_not_awaited()


class TestMove:

    @pytest.mark.asyncio
    async def test_move_loads_next_links(self, mock_service):
        mock_service.start_walk.return_value = ["Dance", "Utah"]
        builder = ChallengeBuilder(mock_service)

        result = await builder.move(["Footloose", "Tremors"], "Footloose", "Utah")

        assert result.title == "Footloose"
        assert result.links == ["Dance", "Utah"]
        assert result.reached_target is False
        mock_service.start_walk.assert_awaited_once_with("Footloose", 1)

    @pytest.mark.asyncio
    async def test_move_onto_target_is_reported(self, mock_service):
        mock_service.start_walk.return_value = ["Salt Lake City"]
        builder = ChallengeBuilder(mock_service)

        result = await builder.move(["Dance", "Utah"], "Utah", "Utah")

        assert result.reached_target is True
        assert result.links == ["Salt Lake City"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("next_title", ["Nevada", "footloose", ""])
    async def test_title_outside_link_set_is_rejected(self, mock_service, next_title):
        builder = ChallengeBuilder(mock_service)

        with pytest.raises(InvalidMoveException) as exc_info:
            await builder.move(["Footloose", "Tremors"], next_title, "Utah")

        assert exc_info.value.title == next_title
        mock_service.start_walk.assert_not_awaited()
