import logging
import httpx
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.config import config
from backend.api.walks import router as walks_router
from backend.api.challenges import router as challenges_router
from wiki_walk import (
    DeadEndException,
    InvalidMoveException,
    PageNotFoundException,
    WikiServiceUnavailableException,
)
from wiki_walk.challenge import ChallengeBuilder
from wiki_walk.config import WalkConfig
from wiki_walk.walk import WalkService

# Configure unified logging to match wiki_walk style
from wiki_walk.logging_config import setup_logging
setup_logging(level=config.log_level, use_rich=config.debug)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info("Starting wiki-walk API...")
    
    async with WalkService(WalkConfig.from_env()) as walk_service:
        logger.info(f"WalkService created ({walk_service.config.api_url})")
        app.state.walk_service = walk_service
        app.state.challenge_builder = ChallengeBuilder(walk_service)
        logger.info("wiki-walk API startup complete")

        yield

        # Shutdown
        logger.info("Shutting down wiki-walk API...")
    logger.info("wiki-walk API shutdown complete")

# Create FastAPI app
app = FastAPI(
    title="wiki-walk API",
    description="Random walks over the Wikipedia link graph",
    version="0.1.0",
    debug=config.debug,
    lifespan=lifespan
)

# Routers and Middleware
app.include_router(walks_router)
app.include_router(challenges_router)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "wiki-walk-api",
        "version": "0.1.0",
    }

@app.exception_handler(PageNotFoundException)
async def page_not_found_handler(request: Request, exc: PageNotFoundException):
    logger.warning(exc.message)
    return JSONResponse(
        status_code=404,
        content={"error": "Page not found", "detail": exc.message, "title": exc.title}
    )

@app.exception_handler(DeadEndException)
async def dead_end_handler(request: Request, exc: DeadEndException):
    logger.warning(exc.message)
    return JSONResponse(
        status_code=409,
        content={"error": "Dead end", "detail": exc.message, "title": exc.title}
    )

@app.exception_handler(InvalidMoveException)
async def invalid_move_handler(request: Request, exc: InvalidMoveException):
    logger.info(exc.message)
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid move", "detail": exc.message, "title": exc.title}
    )

@app.exception_handler(WikiServiceUnavailableException)
async def wiki_unavailable_handler(request: Request, exc: WikiServiceUnavailableException):
    logger.error(exc.message)
    return JSONResponse(
        status_code=502,
        content={"error": "Wikipedia API error", "detail": exc.message}
    )

@app.exception_handler(httpx.HTTPError)
async def transport_error_handler(request: Request, exc: httpx.HTTPError):
    logger.error(f"Wikipedia API unreachable: {exc}")
    return JSONResponse(
        status_code=502,
        content={"error": "Wikipedia API unreachable", "detail": str(exc)}
    )

if __name__ == "__main__":
    uvicorn.run(
        "backend.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="info"
    )
