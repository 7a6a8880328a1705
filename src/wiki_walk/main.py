import asyncio
import logging
from typing import Optional

import httpx
import typer

from wiki_walk.challenge import ChallengeBuilder
from wiki_walk.config import WalkConfig
from wiki_walk.exceptions import WikiWalkException
from wiki_walk.logging_config import setup_logging
from wiki_walk.walk import WalkService


app = typer.Typer(help="Random walks over the Wikipedia link graph.")
logger = logging.getLogger(__name__)


@app.callback()
def configure(
    log_level: str = typer.Option("INFO", "--log-level", "-l", help="DEBUG shows every fetch and hop."),
    plain: bool = typer.Option(False, "--plain", help="Plain log output instead of Rich."),
):
    """
    Walk Wikipedia from the command line.
    """
    setup_logging(level=log_level, use_rich=not plain)


@app.command()
def walk(
    title: str = typer.Argument(..., help="Start article title."),
    degree: int = typer.Option(1, "--degree", "-d", min=1, help="Number of hops to perform."),
    show_links: bool = typer.Option(False, "--show-links", help="Print every reachable link."),
):
    """
    Walk DEGREE hops from TITLE and report the reachable link set.
    """
    result = _run(_walk_async(title, degree))
    logger.info(f"Path: {' -> '.join(result.path)}")
    logger.info(f"Reachable links: {result.link_count}")
    if show_links:
        for link in result.links:
            typer.echo(link)


@app.command()
def random():
    """
    Print one random Wikipedia article title.
    """
    typer.echo(_run(_random_async()))


@app.command()
def challenge(
    title: str = typer.Argument(..., help="Start article title."),
    degree: Optional[int] = typer.Option(None, "--degree", "-d", min=1, help="Hops to the target; random target if omitted."),
):
    """
    Build a start/target challenge from TITLE.
    """
    result = _run(_challenge_async(title, degree))
    typer.echo(f"{result.start_title} -> ? -> {result.target_title}")
    logger.info(f"Mode: {result.mode.value}, first choices: {len(result.start_links)} links")


@app.command()
def move(
    current: str = typer.Argument(..., help="Article the player is on."),
    next_title: str = typer.Argument(..., metavar="NEXT", help="Linked article to move to."),
    target: str = typer.Option(..., "--target", "-t", help="Challenge target title."),
    show_links: bool = typer.Option(False, "--show-links", help="Print the next article's links."),
):
    """
    Follow NEXT from CURRENT and report whether TARGET was reached.
    """
    result = _run(_move_async(current, next_title, target))
    if result.reached_target:
        typer.echo(f"Reached {result.title}!")
    else:
        typer.echo(f"{result.title}: {len(result.links)} links")
    if show_links:
        for link in result.links:
            typer.echo(link)


def _run(coro):
    try:
        return asyncio.run(coro)
    except WikiWalkException as e:
        logger.error(e.message)
        raise typer.Exit(code=1)
    except httpx.HTTPError as e:
        logger.error(f"Wikipedia API unreachable: {e}")
        raise typer.Exit(code=1)


async def _walk_async(title: str, degree: int):
    async with WalkService(WalkConfig.from_env()) as service:
        return await service.walk(title, degree)


async def _random_async() -> str:
    async with WalkService(WalkConfig.from_env()) as service:
        return await service.get_random_article()


async def _challenge_async(title: str, degree: Optional[int]):
    async with WalkService(WalkConfig.from_env()) as service:
        builder = ChallengeBuilder(service)
        if degree is None:
            return await builder.random_challenge(title)
        return await builder.degree_challenge(title, degree)


async def _move_async(current: str, next_title: str, target: str):
    async with WalkService(WalkConfig.from_env()) as service:
        current_links = await service.start_walk(current, 1)
        return await ChallengeBuilder(service).move(current_links, next_title, target)


if __name__ == "__main__":
    app()
