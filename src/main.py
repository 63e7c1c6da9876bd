"""Main entry point for the GitHub comment gateway."""

import os
import sys
import logging

import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

PORT = 5000


def env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def main():
    """Build the client handle and serve the gateway."""
    from src.github.client import GitHubClient, ClientInitError
    from src.api.app import create_app

    try:
        github_client = GitHubClient(token=os.environ.get("GITHUB_TOKEN", ""))
        app = create_app(
            github_client,
            propagate_comment_errors=env_flag("PROPAGATE_COMMENT_ERRORS"),
        )
    except (ClientInitError, ValueError) as e:
        logger.error(f"Invalid GitHub client: {e}")
        sys.exit(1)

    logger.info(f"Listening on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
