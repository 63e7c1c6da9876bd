"""Error envelope responses for failed remote calls."""

from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse
from github import GithubException
from requests.exceptions import RequestException

JSON_MEDIA_TYPE = "application/json; charset=utf-8"

# API errors from GitHub and transport failures PyGithub lets through
REMOTE_ERRORS = (GithubException, RequestException)


def error_message(exc: BaseException) -> str:
    """Extract a client-facing message, preferring GitHub's own message field."""
    if isinstance(exc, GithubException):
        data = exc.data
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
    return str(exc)


def write_error(
    exc: Optional[BaseException],
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> Optional[JSONResponse]:
    """Turn an error into a JSON error envelope response.

    Returns None when there is no error, so callers only stop processing
    when a response comes back.
    """
    if exc is None:
        return None
    return JSONResponse(
        status_code=status_code,
        content={"error": error_message(exc)},
        media_type=JSON_MEDIA_TYPE,
    )
