"""FastAPI application factory for the comment gateway."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.github.client import GitHubClient
from .handlers import router

logger = logging.getLogger(__name__)


def create_app(
    client: GitHubClient, propagate_comment_errors: bool = False,
) -> FastAPI:
    """Build the app around an already constructed client handle.

    Args:
        client: Shared GitHub client handle. Must wrap a live PyGithub client.
        propagate_comment_errors: Report comment creation failures as 500
            instead of only logging them.

    Raises:
        ValueError: The client handle or its inner client is missing.
    """
    if client is None or getattr(client, "github", None) is None:
        raise ValueError("Invalid GitHub client")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Close the client handle on shutdown."""
        logger.info("GitHub comment gateway started")
        yield
        client.close()
        logger.info("GitHub comment gateway shut down")

    app = FastAPI(
        title="GitHub Comment Gateway",
        docs_url=None, redoc_url=None, openapi_url=None,
        lifespan=lifespan,
    )
    app.state.github_client = client
    app.state.propagate_comment_errors = propagate_comment_errors

    app.include_router(router)

    logger.info(f"Routes registered: {[r.path for r in router.routes]}")
    return app
